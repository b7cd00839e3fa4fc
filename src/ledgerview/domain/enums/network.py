from enum import Enum


class Network(str, Enum):
    """Ledger RPC endpoints the explorer can talk to. Values match the settings keys."""

    LOCAL = "local"
    DEVNET = "devnet"
    TESTNET = "testnet"
