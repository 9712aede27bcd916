from typing import List

from orghooks.core.services.github.api.client import get_client
from orghooks.core.services.github.api.endpoints.utils import add_options
from orghooks.core.services.github.api.models import Hook

ORG_HOOK_PREVIEW_HEADER = "application/vnd.github.sersi-preview+json"

def _request(client, method, path, body=None):
    req = client.new_request(method, path, body)
    req.headers["Accept"] = ORG_HOOK_PREVIEW_HEADER
    return req

def create_hook(owner, hook, client=None):
    """Create a hook for an organization.

    Name and config are required by GitHub, not checked here.

    Args:
        owner: Organization login
        hook: Hook payload
        client: GitHubClient (optional, default client otherwise)

    Returns:
        tuple: (Hook created by GitHub, Response)
    """
    client = client or get_client()
    req = _request(client, "POST", f"orgs/{owner}/hooks", hook)
    return client.do(req, Hook)

def list_hooks(owner, opt=None, client=None):
    """List the hooks of an organization.

    Args:
        owner: Organization login
        opt: ListOptions for pagination (optional)
        client: GitHubClient (optional)

    Returns:
        tuple: (list of Hook in server order, Response)
    """
    client = client or get_client()
    path = add_options(f"orgs/{owner}/hooks", opt)
    req = _request(client, "GET", path)
    hooks, resp = client.do(req, List[Hook])
    return hooks or [], resp

def get_hook(owner, hook_id, client=None):
    """Get a single hook.

    Args:
        owner: Organization login
        hook_id: Hook ID
        client: GitHubClient (optional)

    Returns:
        tuple: (Hook, Response)
    """
    client = client or get_client()
    req = _request(client, "GET", f"orgs/{owner}/hooks/{hook_id}")
    return client.do(req, Hook)

def edit_hook(owner, hook_id, hook, client=None):
    """Update a hook. Only the fields set on the payload are sent.

    Returns:
        tuple: (updated Hook, Response)
    """
    client = client or get_client()
    req = _request(client, "PATCH", f"orgs/{owner}/hooks/{hook_id}", hook)
    return client.do(req, Hook)

def delete_hook(owner, hook_id, client=None):
    """Delete a hook.

    Returns:
        Response: transport metadata only
    """
    client = client or get_client()
    req = _request(client, "DELETE", f"orgs/{owner}/hooks/{hook_id}")
    _, resp = client.do(req)
    return resp

def test_hook(owner, hook_id, client=None):
    """Trigger a test delivery of a hook.

    Returns:
        Response: transport metadata only
    """
    client = client or get_client()
    req = _request(client, "POST", f"orgs/{owner}/hooks/{hook_id}/tests")
    _, resp = client.do(req)
    return resp
