class ResourceDoesNotSupportOperationError(Exception):
    """Raised by a handler entry point the resource does not implement."""

    def __init__(self, message: str = "Operation not supported by this resource"):
        super().__init__(message)
