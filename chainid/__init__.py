from ._active import (
    ParseChainIDFunc,
    ValidChainIDFunc,
    get_parse_chain_id_func,
    get_valid_chain_id_func,
    is_valid_chain_id,
    parse_chain_id,
    set_parse_chain_id_func,
    set_valid_chain_id_func,
)
from ._validation import (
    CHAIN_ID_RE,
    MAX_CHAIN_ID_LENGTH,
    default_parse_chain_id,
    default_valid_chain_id,
)
from .config import apply_config, chain_id_from_env, get_core_config
from .exc import ChainIDWarning, InvalidChainID

__version__ = "0.1.0"

__all__ = [
    "CHAIN_ID_RE",
    "MAX_CHAIN_ID_LENGTH",
    "ChainIDWarning",
    "InvalidChainID",
    "ParseChainIDFunc",
    "ValidChainIDFunc",
    "apply_config",
    "chain_id_from_env",
    "default_parse_chain_id",
    "default_valid_chain_id",
    "get_core_config",
    "get_parse_chain_id_func",
    "get_valid_chain_id_func",
    "is_valid_chain_id",
    "parse_chain_id",
    "set_parse_chain_id_func",
    "set_valid_chain_id_func",
]
