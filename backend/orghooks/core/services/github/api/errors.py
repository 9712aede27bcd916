# orghooks/core/services/github/api/errors.py
from typing import Any, Dict, List, Optional

from orghooks.core.services.github.api.models import Response


class GitHubError(Exception):
    """Base class for errors raised by the GitHub binding."""


class RequestBuildError(GitHubError):
    """The request could not be built locally; nothing was sent."""


class ErrorResponse(GitHubError):
    """GitHub answered with a non-2xx status.

    Attributes:
        response: Response wrapper of the failed exchange
        message: Error message from the JSON body (or the HTTP reason)
        errors: Per-field error details, as returned by GitHub
        documentation_url: Link to the relevant API docs, if any
    """

    def __init__(self, response: Response, message: str = "", errors: Optional[List[Dict[str, Any]]] = None,
                 documentation_url: Optional[str] = None):
        self.response = response
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        super().__init__(str(self))

    def __str__(self):
        req = self.response.raw.request
        method = req.method if req is not None else ""
        detail = f"{method} {self.response.raw.url}: {self.response.status_code} {self.message}"
        if self.errors:
            detail += f" {self.errors}"
        return detail.strip()


class RateLimitError(ErrorResponse):
    """The rate limit is exhausted until ``rate.reset``."""

    def __init__(self, response: Response, message: str = "", errors=None, documentation_url=None):
        super().__init__(response, message, errors, documentation_url)
        self.rate = response.rate


def check_response(response: Response) -> None:
    """Raise an ErrorResponse unless the status code is 2xx.

    The JSON error body is parsed when possible; a body that is not JSON
    still produces an ErrorResponse, with the HTTP reason as message.
    """
    if 200 <= response.status_code < 300:
        return

    message = response.raw.reason or ""
    errors = None
    documentation_url = None
    try:
        payload = response.raw.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("message") or message
        errors = payload.get("errors")
        documentation_url = payload.get("documentation_url")

    if response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
        raise RateLimitError(response, message, errors, documentation_url)
    raise ErrorResponse(response, message, errors, documentation_url)
