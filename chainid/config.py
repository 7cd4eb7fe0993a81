import os
import warnings
from typing import Any, Callable, Dict, Optional, Set

from ._active import set_parse_chain_id_func, set_valid_chain_id_func
from .exc import ChainIDWarning

SETTERS: Dict[str, Callable[[Any], None]] = {
    "valid_chain_id_func": set_valid_chain_id_func,
    "parse_chain_id_func": set_parse_chain_id_func,
}


def get_core_config() -> Set[str]:
    return set(SETTERS)


def apply_config(config: Dict[str, Any]) -> None:
    """
    Install the validator and/or parser named in ``config``.

    Meant to be called once during start up, before the functions are used
    from several threads.
    """
    for key, value in config.items():
        setter = SETTERS.get(key)
        if setter is None:
            warnings.warn(
                f"unknown chainid config key {key!r} ignored",
                ChainIDWarning,
                stacklevel=2,
            )
            continue
        if not callable(value):
            raise TypeError(f"{key} must be callable")
        setter(value)


def chain_id_from_env(default: Optional[str] = None) -> Optional[str]:
    value = os.getenv("CHAIN_ID") or os.getenv("chain_id")
    if not value:
        return default
    return value.strip()
