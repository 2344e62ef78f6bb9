"""Error taxonomy shared by services and the HTTP layer."""


class MeetSynthError(Exception):
    """Base error carrying a machine-readable kind and an HTTP status."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Structured kind-plus-message body."""
        return {"error": self.kind, "message": self.message}


class ValidationError(MeetSynthError):
    """Missing or malformed request fields. Raised before any side effect."""

    kind = "validation_error"
    status_code = 400


class NotFoundError(MeetSynthError):
    """An identifier did not resolve to a stored row."""

    kind = "not_found"
    status_code = 404


class ServiceMisconfiguredError(MeetSynthError):
    """Credentials for an external service are absent."""

    kind = "service_misconfigured"
    status_code = 500


class UpstreamServiceError(MeetSynthError):
    """An external call was attempted and failed."""

    kind = "upstream_service_error"
    status_code = 502
