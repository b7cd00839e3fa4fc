from ledgerview.domain.enums.link_category import LinkCategory
from ledgerview.domain.enums.network import Network
from ledgerview.domain.enums.status import ExecutionStatus, LoadStatus
from ledgerview.domain.enums.tx_kind import TransactionKind

__all__ = [
    "ExecutionStatus",
    "LinkCategory",
    "LoadStatus",
    "Network",
    "TransactionKind",
]
