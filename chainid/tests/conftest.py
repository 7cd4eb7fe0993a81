from typing import Generator

import pytest

from chainid import (
    default_parse_chain_id,
    default_valid_chain_id,
    set_parse_chain_id_func,
    set_valid_chain_id_func,
)


@pytest.fixture(autouse=True)
def restore_default_funcs() -> Generator[None, None, None]:
    yield
    set_valid_chain_id_func(default_valid_chain_id)
    set_parse_chain_id_func(default_parse_chain_id)
