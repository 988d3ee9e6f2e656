"""Error types raised by fleetview operations.

All errors derive from FleetError so the CLI can surface them uniformly.
"""


class FleetError(RuntimeError):
    """Base class for fleetview errors."""


class FleetApiError(FleetError):
    """The Fleet server rejected a request or could not be reached.

    Attributes:
        status_code: HTTP status code, or None for transport failures
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(FleetApiError):
    """A named resource does not exist on the server."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class ConfigError(FleetError):
    """Client configuration is missing or malformed."""


class OperationError(FleetError):
    """Wraps a failure with a short description of the failing operation.

    The message reads "<operation>: <cause>" and the cause is kept on
    ``__cause__`` when raised with ``from``.
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation}: {cause}")
        self.operation = operation
        self.cause = cause
