from .org_hooks import (
    ORG_HOOK_PREVIEW_HEADER, create_hook, list_hooks, get_hook,
    edit_hook, delete_hook, test_hook
)
from .utils import add_options
