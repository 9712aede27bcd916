import json
import logging
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, TypeAdapter

from orghooks.config.config import settings
from orghooks.core.services.github.api.errors import GitHubError, RequestBuildError, check_response
from orghooks.core.services.github.api.models import Response

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/vnd.github.v3+json"


def _encode_body(body):
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


class GitHubClient:
    """Shared collaborator for the GitHub endpoints.

    ``new_request`` builds a prepared request relative to the base URL and
    ``do`` sends it, checks the status and decodes the JSON body.
    """

    def __init__(self, base_url=None, token=None, user_agent=None, timeout=None, session=None):
        base_url = base_url or settings.GITHUB_API_URL
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.token = settings.GITHUB_TOKEN if token is None else token
        self.user_agent = user_agent or settings.GITHUB_USER_AGENT
        self.timeout = settings.GITHUB_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()

    def new_request(self, method, path, body=None) -> requests.PreparedRequest:
        if path.startswith("/"):
            raise RequestBuildError(f"path must be relative to the base URL, got {path!r}")

        headers = {
            "Accept": DEFAULT_MEDIA_TYPE,
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"

        data = None
        if body is not None:
            try:
                data = json.dumps(_encode_body(body))
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"cannot encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        try:
            request = requests.Request(method, urljoin(self.base_url, path), headers=headers, data=data)
            return self.session.prepare_request(request)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestBuildError(f"invalid request {method} {path}: {e}") from e

    def do(self, request: requests.PreparedRequest, result_type=None):
        """Send a prepared request.

        Args:
            request: Request built by ``new_request``
            result_type: Type to decode the JSON body into (optional)

        Returns:
            tuple: (decoded value or None, Response)

        A body that does not decode into ``result_type`` raises the
        original ValueError with the Response set as its ``response``.
        """
        logger.debug(f"GitHub API request: {request.method} {request.url}")
        raw = self.session.send(request, timeout=self.timeout)
        response = Response(raw)
        logger.debug(f"GitHub API response [{response.status_code}] remaining={response.rate.remaining}")

        try:
            check_response(response)
        except GitHubError as e:
            logger.warning(f"GitHub API error: {e}")
            raise

        if result_type is None or not raw.content:
            return None, response
        try:
            return TypeAdapter(result_type).validate_python(raw.json()), response
        except ValueError as e:
            # JSONDecodeError / ValidationError, raised as is with the exchange attached
            e.response = response
            raise


_default_client = None

def get_client() -> GitHubClient:
    global _default_client
    if _default_client is None:
        _default_client = GitHubClient()
    return _default_client

def set_client(client):
    global _default_client
    _default_client = client
