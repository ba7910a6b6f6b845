"""
Error Taxonomy
==============
Every failure of an analysis is raised as an AnalysisError subclass.
The HTTP layer renders them as a single envelope: {"error": message}.

    ValidationError       — 400, bad or missing input
    ConfigurationError    — 500, credential not configured
    UpstreamError         — 500, non-2xx / malformed / empty upstream response
    UpstreamTimeoutError  — 500, upstream call exceeded the timeout
    UnexpectedError       — 500, anything else
"""
from typing import Optional


class AnalysisError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    status_code = 400


class ConfigurationError(AnalysisError):
    status_code = 500


class UpstreamError(AnalysisError):
    """Upstream chat-completion call failed. Carries upstream status/body."""

    status_code = 500

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        upstream_body: str = "",
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


class UpstreamTimeoutError(UpstreamError):
    pass


class UnexpectedError(AnalysisError):
    status_code = 500
