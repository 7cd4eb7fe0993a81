import re

from .exc import InvalidChainID

MAX_CHAIN_ID_LENGTH = 48

REGEX_CHAIN_NAME = r"[a-z]{1,}"
REGEX_EIP155_SEPARATOR = r"_{1}"
REGEX_EIP155 = r"[1-9][0-9]*"
REGEX_EPOCH_SEPARATOR = r"-{1}"
REGEX_EPOCH = r"[1-9][0-9]*"

CHAIN_ID_RE = re.compile(
    rf"^({REGEX_CHAIN_NAME}){REGEX_EIP155_SEPARATOR}({REGEX_EIP155})"
    rf"{REGEX_EPOCH_SEPARATOR}({REGEX_EPOCH})$"
)


def default_valid_chain_id(chain_id: str) -> bool:
    """Return True if ``chain_id`` is a well formed ``<name>_<eip155>-<epoch>``."""
    if len(chain_id) > MAX_CHAIN_ID_LENGTH:
        return False
    return CHAIN_ID_RE.fullmatch(chain_id) is not None


def default_parse_chain_id(chain_id: str) -> int:
    """
    Parse the epoch out of a chain identifier.

    Surrounding whitespace is stripped before the length check, unlike
    :func:`default_valid_chain_id` which measures the raw string.

    :param chain_id: chain identifier, e.g. ``ethermint_9000-1``
    :raises InvalidChainID: if the identifier is too long or malformed
    """
    chain_id = chain_id.strip()
    if len(chain_id) > MAX_CHAIN_ID_LENGTH:
        raise InvalidChainID(
            chain_id, f"cannot exceed {MAX_CHAIN_ID_LENGTH} chars"
        )

    match = CHAIN_ID_RE.fullmatch(chain_id)
    if match is None or len(match.groups()) != 3 or not match.group(1):
        raise InvalidChainID(chain_id, "does not match <name>_<eip155>-<epoch>")

    epoch = match.group(3)
    try:
        return int(epoch, 10)
    except ValueError as e:
        raise InvalidChainID(
            chain_id, f"epoch {epoch} must be base-10 integer format"
        ) from e
