"""Shared fixtures: a GitHubClient whose session never touches the network."""

import json
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from orghooks.core.services.github.api.client import GitHubClient

BASE_URL = "https://api.github.com/"


def build_response(status_code=200, body=None, headers=None, url=BASE_URL, reason="OK"):
    """Build a requests.Response as the session would return it."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = url
    resp.encoding = "utf-8"
    resp.headers = CaseInsensitiveDict(headers or {})
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers.setdefault("Content-Type", "application/json")
    return resp


@pytest.fixture
def session():
    session = requests.Session()
    session.send = MagicMock(return_value=build_response())
    return session


@pytest.fixture
def client(session):
    return GitHubClient(base_url=BASE_URL, token="s3cr3t", user_agent="orghooks-tests", timeout=5, session=session)


def sent_request(session):
    """Return the prepared request passed to the last session.send call."""
    assert session.send.call_count == 1
    return session.send.call_args.args[0]


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def last_request():
    return sent_request
