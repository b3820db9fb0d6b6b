"""Domain models and entities."""

from shared.domain.models import (
    Alphabet,
    Credentials,
    MatchFound,
    ProgressTick,
    SearchExhausted,
    SearchCancelled,
    SearchSettings,
    RangeDict,
    SearchRangePayload,
    MatchDict,
    SearchResultPayload,
)
from shared.domain.status import SearchState
from shared.domain.errors import ConfigurationError, OutputSinkError
from shared.domain.consts import (
    ResultStatus,
    ResultStatusLiteral,
    AlphabetPresetName,
    CredentialsTemplate,
    HashWidth,
    OutputFormat,
    ProgressDisplay,
    CancelSearchFields,
    CancelSearchResponseFields,
    CancelSearchResponseStatus,
)

__all__ = [
    "Alphabet",
    "Credentials",
    "MatchFound",
    "ProgressTick",
    "SearchExhausted",
    "SearchCancelled",
    "SearchSettings",
    "RangeDict",
    "SearchRangePayload",
    "MatchDict",
    "SearchResultPayload",
    "SearchState",
    "ConfigurationError",
    "OutputSinkError",
    "ResultStatus",
    "ResultStatusLiteral",
    "AlphabetPresetName",
    "CredentialsTemplate",
    "HashWidth",
    "OutputFormat",
    "ProgressDisplay",
    "CancelSearchFields",
    "CancelSearchResponseFields",
    "CancelSearchResponseStatus",
]
