"""Exception types raised by wp-abilities-mcp."""


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""


class UpstreamError(Exception):
    """The WordPress Abilities API did not return a successful response.

    Attributes:
        status: HTTP status code, or None when no response was received
        body: Response body text (empty when no response was received)
    """

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class InvocationError(UpstreamError):
    """Executing an ability failed."""
