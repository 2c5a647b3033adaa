"""Local path resolution for upload tools."""

import os

from .errors import MediaFileNotFoundError


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with $HOME (empty string if unset)."""
    if path.startswith("~"):
        return os.environ.get("HOME", "") + path[1:]
    return path


def resolve_path(path: str, label: str = "File") -> str:
    """Expand ``~`` and check the path exists.

    No symlink resolution and no permission check; unreadable files fail
    later when the client reads them.

    Raises:
        MediaFileNotFoundError: with the resolved path in the message.
    """
    resolved = expand_home(path)
    if not os.path.exists(resolved):
        raise MediaFileNotFoundError(f"{label} not found: {resolved}")
    return resolved
