class InvalidChainID(ValueError):
    """Raised when a chain identifier cannot be parsed."""

    def __init__(self, chain_id: str, reason: str) -> None:
        super().__init__(f"invalid chain-id {chain_id!r}: {reason}")
        self.chain_id = chain_id
        self.reason = reason


class ChainIDWarning(Warning):
    pass
