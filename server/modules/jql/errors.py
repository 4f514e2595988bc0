"""Error taxonomy for the JQL translation endpoint."""


class JQLProxyError(Exception):
    """Base error carrying the HTTP status and the message shown to the caller."""

    status_code: int = 500
    public_message: str = "Server error."

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.public_message)
        self.detail = detail


class InputValidationError(JQLProxyError):
    """The request carried no usable text."""

    status_code = 400
    public_message = "No text to translate."


class ConfigurationError(JQLProxyError):
    """The Gemini API key is not set for this deployment."""

    status_code = 500
    public_message = "Server error: the API key is not configured."


class UpstreamError(JQLProxyError):
    """The call to the Gemini API failed."""

    status_code = 500
    public_message = "Server error. Check the API key and permissions."


class UpstreamResponseError(UpstreamError):
    """Gemini answered, but without any text to return."""
