from urllib.parse import urlencode, urlsplit, urlunsplit, parse_qsl

from pydantic import BaseModel

from orghooks.core.services.github.api.errors import RequestBuildError

def add_options(path, opt=None):
    """Append list options to a path as query parameters.

    Args:
        path: Relative API path (e.g. 'orgs/github/hooks')
        opt: ListOptions or dict (optional)

    Returns:
        str: Path with the non-empty, non-zero options in its query string
    """
    if opt is None:
        return path

    if isinstance(opt, BaseModel):
        params = opt.model_dump()
    elif isinstance(opt, dict):
        params = dict(opt)
    else:
        raise RequestBuildError(f"cannot encode options of type {type(opt).__name__}")

    # Valeurs vides omises (page=0 = page par défaut)
    params = {k: v for k, v in params.items() if v not in (None, 0, "")}
    if not params:
        return path

    parts = urlsplit(path)
    query = parse_qsl(parts.query) + list(params.items())
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))
