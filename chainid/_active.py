"""
Process-wide validator and parser slots.

Both slots start out holding the default implementations from
:mod:`chainid._validation` and can be replaced at any time. Reads and writes
of the slot references are serialised by a lock; the installed function
itself is called outside of it.
"""

import threading
from typing import Callable

from ._validation import default_parse_chain_id, default_valid_chain_id

ValidChainIDFunc = Callable[[str], bool]
ParseChainIDFunc = Callable[[str], int]

_lock = threading.Lock()
_valid_chain_id_func: ValidChainIDFunc = default_valid_chain_id
_parse_chain_id_func: ParseChainIDFunc = default_parse_chain_id


def set_valid_chain_id_func(fn: ValidChainIDFunc) -> None:
    """Replace the validator used by :func:`is_valid_chain_id`."""
    global _valid_chain_id_func
    with _lock:
        _valid_chain_id_func = fn


def set_parse_chain_id_func(fn: ParseChainIDFunc) -> None:
    """Replace the parser used by :func:`parse_chain_id`."""
    global _parse_chain_id_func
    with _lock:
        _parse_chain_id_func = fn


def get_valid_chain_id_func() -> ValidChainIDFunc:
    with _lock:
        return _valid_chain_id_func


def get_parse_chain_id_func() -> ParseChainIDFunc:
    with _lock:
        return _parse_chain_id_func


def is_valid_chain_id(chain_id: str) -> bool:
    """Return False if ``chain_id`` is incorrectly formatted."""
    return get_valid_chain_id_func()(chain_id)


def parse_chain_id(chain_id: str) -> int:
    """
    Parse a chain identifier's epoch into an Ethereum compatible chain-id.

    Whatever the installed parser raises is propagated unchanged; the default
    parser raises :class:`~chainid.exc.InvalidChainID`.
    """
    return get_parse_chain_id_func()(chain_id)
