from enum import Enum


class TransactionKind(str, Enum):
    """Closed set of ledger transaction kinds, spelled the way the RPC reports them."""

    TRANSFER_OBJECT = "TransferObject"
    PUBLISH = "Publish"
    CALL = "Call"
    TRANSFER_SUI = "TransferSui"
    CHANGE_EPOCH = "ChangeEpoch"
    PAY = "Pay"
    PAY_SUI = "PaySui"
    PAY_ALL_SUI = "PayAllSui"
