class LinkStoreError(Exception):
    """Base class for failures raised by the link core."""

    kind = "link_store_error"


class BackendError(LinkStoreError):
    """Transient backend failure. Callers may retry the whole operation."""

    kind = "backend_error"


class BackendUnavailableError(BackendError):
    """Raised when the key-value backend cannot be reached or times out."""

    kind = "backend_unavailable"

    def __init__(self, message: str = "Backend unavailable") -> None:
        super().__init__(message)


class CounterIncrementError(BackendError):
    """Raised when the atomic counter increment fails; no code was assigned."""

    kind = "counter_increment_failed"

    def __init__(self, message: str = "Counter increment failed") -> None:
        super().__init__(message)


class InvalidCodeError(LinkStoreError, ValueError):
    """Raised when a code contains characters outside the alphabet."""

    kind = "invalid_code"


NOT_FOUND = "not_found"
