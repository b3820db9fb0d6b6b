"""FastAPI application for minion service."""

import logging
from fastapi import FastAPI, HTTPException
from shared.domain.models import SearchRangePayload, SearchResultPayload
from shared.domain.consts import (
    ResultStatus,
    CancelSearchFields,
    CancelSearchResponseFields,
    CancelSearchResponseStatus,
)
from shared.domain.errors import ConfigurationError
from minion.services.bruteforce import username_space_bounds
from minion.services.worker import search_range
from minion.infrastructure.cancellation import CancellationRegistry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Credentials Bruteforce Minion Service")


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint for Docker healthchecks.

    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": "ok"}


@app.post("/search-range", response_model=SearchResultPayload)
def search_range_endpoint(payload: SearchRangePayload) -> SearchResultPayload:
    """
    Search every (username, password) pair whose username index is in the range.

    Runs in FastAPI's threadpool so a long search does not block
    /cancel-search on the event loop.

    Returns:
        SearchResultPayload listing every match in the range, or INVALID_INPUT
        when the alphabet, lengths or range cannot describe a search.
    """
    start_index = payload.range.start_index
    end_index = payload.range.end_index
    try:
        try:
            min_idx, max_idx = username_space_bounds(payload.settings)
        except ConfigurationError as e:
            return SearchResultPayload.failure(
                ResultStatus.INVALID_INPUT, start_index, f"Invalid search settings: {e}"
            )

        if end_index > max_idx:
            return SearchResultPayload.failure(
                ResultStatus.INVALID_INPUT,
                start_index,
                f"Range [{start_index}, {end_index}] is outside username bounds [{min_idx}, {max_idx}].",
            )

        logger.info(
            "Received search-range request: search_id=%s, request_id=%s, range=[%d, %d], "
            "lengths=%d-%d, alphabet_size=%d",
            payload.search_id,
            payload.request_id,
            start_index,
            end_index,
            payload.settings.min_length,
            payload.settings.max_length,
            len(payload.settings.alphabet),
        )

        return search_range(
            settings=payload.settings,
            start_index=start_index,
            end_index=end_index,
            search_id=payload.search_id,
            collect_matches=True,
        )
    except Exception as e:
        # Log unexpected errors but return ERROR result instead of 500
        logger.error(
            f"Unexpected error in search-range endpoint for search {payload.search_id}: {e}",
            exc_info=True,
        )
        return SearchResultPayload.failure(ResultStatus.ERROR, start_index, str(e))


@app.post("/cancel-search")
async def cancel_search_endpoint(request: dict) -> dict:
    """
    Cancel a search (best-effort, idempotent).

    Marks the search id as cancelled in the CancellationRegistry; running
    drivers notice it on their next username step or cancellation check.

    Returns:
        Dict with status (OK or ERROR) and optional error message.

    Raises:
        HTTPException: If search_id is missing (400 status).
    """
    try:
        search_id = request.get(CancelSearchFields.SEARCH_ID)
        if not search_id:
            raise HTTPException(
                status_code=400,
                detail="Missing search_id"
            )

        CancellationRegistry().cancel(search_id)

        logger.info(f"Cancellation requested for search_id={search_id}")

        return {
            CancelSearchResponseFields.STATUS: CancelSearchResponseStatus.OK,
            CancelSearchResponseFields.ERROR: None,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Error cancelling search {request.get(CancelSearchFields.SEARCH_ID, 'unknown')}: {e}",
            exc_info=True,
        )
        return {
            CancelSearchResponseFields.STATUS: CancelSearchResponseStatus.ERROR,
            CancelSearchResponseFields.ERROR: str(e),
        }
