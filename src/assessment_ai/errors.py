"""
Exception types raised by the Assessment AI core.
"""
from enum import Enum
from typing import Any, Optional


class AssessmentAIError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(AssessmentAIError):
    """Raised when the client is missing required configuration."""


class UpstreamErrorReason(str, Enum):
    """Why the generative AI endpoint rejected a request."""
    RATE_LIMITED = "rate_limited"
    QUOTA_EXHAUSTED = "quota_exhausted"
    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"
    UNKNOWN = "unknown"


RETRYABLE_REASONS = frozenset({
    UpstreamErrorReason.RATE_LIMITED,
    UpstreamErrorReason.QUOTA_EXHAUSTED,
})


class UpstreamError(AssessmentAIError):
    """Non-success response from the generative AI endpoint."""

    def __init__(
        self,
        status: Optional[int],
        body: Any = None,
        reason: UpstreamErrorReason = UpstreamErrorReason.UNKNOWN,
    ):
        self.status = status
        self.body = body
        self.reason = reason
        super().__init__(f"Gemini API request failed: {status} - {body}")

    @property
    def retryable(self) -> bool:
        return self.reason in RETRYABLE_REASONS

    @classmethod
    def from_status(
        cls,
        status: Optional[int],
        body: Any = None,
        api_status: Optional[str] = None,
    ) -> "UpstreamError":
        """
        Build an error, classifying the reason from the HTTP status.

        Args:
            status: HTTP status code returned by the endpoint
            body: Error payload or message for diagnostics
            api_status: Provider status string (e.g. RESOURCE_EXHAUSTED)

        Returns:
            UpstreamError tagged with a reason code
        """
        text = str(body or "").lower()
        if api_status == "RESOURCE_EXHAUSTED" or "quota" in text:
            reason = UpstreamErrorReason.QUOTA_EXHAUSTED
            if status == 429 and "quota" not in text:
                reason = UpstreamErrorReason.RATE_LIMITED
        elif status == 429:
            reason = UpstreamErrorReason.RATE_LIMITED
        elif status is not None and status >= 500:
            reason = UpstreamErrorReason.SERVER_ERROR
        elif status is not None and status >= 400:
            reason = UpstreamErrorReason.CLIENT_ERROR
        else:
            reason = UpstreamErrorReason.UNKNOWN
        return cls(status=status, body=body, reason=reason)


class MalformedResponseError(AssessmentAIError):
    """Success response that does not carry the expected text payload."""


class ParseError(AssessmentAIError):
    """Model output could not be turned into a structured record."""

    def __init__(self, message: str, raw_text: Any = None):
        self.raw_text = raw_text
        super().__init__(message)
