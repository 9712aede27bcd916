# orghooks/core/services/github/api/models.py

from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import urlparse, parse_qs

import requests

# --- Ressources GitHub ---

class Hook(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    events: Optional[List[str]] = None
    active: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class ListOptions(BaseModel):
    page: Optional[int] = None
    per_page: Optional[int] = None

# --- Métadonnées de transport ---

@dataclass
class Rate:
    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[datetime] = None

    @classmethod
    def from_headers(cls, headers) -> "Rate":
        def _int(name):
            value = headers.get(name)
            try:
                return int(value) if value is not None else None
            except ValueError:
                return None

        reset_epoch = _int("X-RateLimit-Reset")
        reset = datetime.fromtimestamp(reset_epoch, tz=timezone.utc) if reset_epoch is not None else None
        return cls(
            limit=_int("X-RateLimit-Limit"),
            remaining=_int("X-RateLimit-Remaining"),
            reset=reset,
        )


def _page_of(link: Optional[dict]) -> Optional[int]:
    if not link:
        return None
    values = parse_qs(urlparse(link.get("url", "")).query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


class Response:
    """Result of one HTTP exchange with the GitHub API.

    Wraps the raw ``requests.Response`` and exposes the pagination pages
    found in the ``Link`` header together with the rate limit headers.
    """

    def __init__(self, raw: requests.Response):
        self.raw = raw
        links = raw.links or {}
        self.next_page = _page_of(links.get("next"))
        self.prev_page = _page_of(links.get("prev"))
        self.first_page = _page_of(links.get("first"))
        self.last_page = _page_of(links.get("last"))
        self.rate = Rate.from_headers(raw.headers)

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self):
        return self.raw.headers

    def __repr__(self):
        return f"<Response [{self.status_code}] {self.raw.url}>"
