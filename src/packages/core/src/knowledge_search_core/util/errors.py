"""Error types shared by the adapter."""


class AdapterError(Exception):
    """An error that maps to an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(AdapterError):
    """The request body is missing or malformed."""

    status_code = 400


class AuthError(AdapterError):
    """The shared-secret token is missing or wrong."""

    status_code = 401

    def __init__(self, message: str = "unauthorized"):
        super().__init__(message)


class UpstreamError(AdapterError):
    """The embedding or vector search call failed."""

    status_code = 500


class StartupConfigError(Exception):
    """Required environment configuration is missing or invalid."""

    def __init__(self, missing: list[str]):
        super().__init__("Missing env: " + ", ".join(missing))
        self.missing = missing


class PayloadTooLargeError(AdapterError):
    """The request body exceeds the configured size limit."""

    status_code = 413

    def __init__(self, message: str = "request entity too large"):
        super().__init__(message)
