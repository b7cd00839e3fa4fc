from enum import Enum


class ExecutionStatus(str, Enum):
    """On-chain execution outcome of a transaction."""

    SUCCESS = "success"
    FAILURE = "failure"


class LoadStatus(str, Enum):
    """Page load lifecycle."""

    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "fail"
