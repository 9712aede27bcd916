"""
Module GitHub - Gestion des webhooks d'organisation via l'API REST GitHub
"""
from orghooks.config.logger import logger  # handlers du logger "orghooks"
from .api.client import GitHubClient, get_client, set_client
from .api.errors import GitHubError, RequestBuildError, ErrorResponse, RateLimitError
from .api.models import Hook, ListOptions, Rate, Response
from .api.endpoints.org_hooks import (
    ORG_HOOK_PREVIEW_HEADER,
    create_hook,
    list_hooks,
    get_hook,
    edit_hook,
    delete_hook,
    test_hook,
)

__all__ = [
    'GitHubClient',
    'get_client',
    'set_client',
    'GitHubError',
    'RequestBuildError',
    'ErrorResponse',
    'RateLimitError',
    'Hook',
    'ListOptions',
    'Rate',
    'Response',
    'ORG_HOOK_PREVIEW_HEADER',
    'create_hook',
    'list_hooks',
    'get_hook',
    'edit_hook',
    'delete_hook',
    'test_hook',
]
