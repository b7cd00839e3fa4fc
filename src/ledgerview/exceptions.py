"""Error taxonomy for the transaction page engine."""


class LedgerViewError(Exception):
    """Base class for all ledgerview errors."""


class InvalidRange(LedgerViewError):
    """The requested page resolves to a negative or out-of-bounds sequence window."""

    def __init__(
        self,
        message: str = "Invalid transaction number",
        *,
        start: int | None = None,
        end: int | None = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class ExternalServiceError(LedgerViewError):
    """A collaborator outside this process misbehaved."""


class TransportError(ExternalServiceError):
    """Any remote-call failure (HTTP, JSON-RPC error object, malformed payload)."""

    def __init__(self, message: str, *, method: str | None = None) -> None:
        super().__init__(message)
        self.method = method
