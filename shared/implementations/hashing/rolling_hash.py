"""32-bit rolling hash over the credentials byte template."""

from shared.domain.consts import CredentialsTemplate, HashWidth


def fold(data: bytes, state: int = 0) -> int:
    """Fold bytes into an unsigned 32-bit accumulator.

    Each byte updates the accumulator as ``acc = (acc << 5) - acc + byte``.
    Masking after every byte reproduces two's-complement wraparound, so the
    returned state can be passed back in to continue the fold.

    Args:
        data: Bytes to fold, left to right
        state: Unsigned accumulator to resume from (0 for a fresh fold)

    Returns:
        Unsigned accumulator in [0, 2**32)
    """
    mask = HashWidth.MASK
    for byte in data:
        state = ((state << 5) - state + byte) & mask
    return state


def to_signed(state: int) -> int:
    """Reinterpret an unsigned 32-bit accumulator as a signed integer."""
    if state > HashWidth.MAX_SIGNED:
        return state - (1 << HashWidth.BITS)
    return state


def prefix_state(username: bytes) -> int:
    """Accumulator after ``username=<username>&password=``.

    The password is the only part that changes along the inner axis, so the
    driver computes this once per username and folds passwords onto it.
    """
    state = fold(CredentialsTemplate.USERNAME_FIELD)
    state = fold(username, state)
    return fold(CredentialsTemplate.PASSWORD_FIELD, state)


def credentials_hash(username: bytes, password: bytes) -> int:
    """Signed 32-bit hash of ``username=<username>&password=<password>``."""
    return to_signed(fold(password, prefix_state(username)))


def verify(username: bytes, password: bytes, target_hash: int) -> bool:
    """Check whether a pair hashes to the target."""
    return credentials_hash(username, password) == target_hash
