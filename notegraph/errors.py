"""Exceptions raised by the host-side parts of notegraph.

The graph engine itself never raises for malformed input; these cover the vault and the
HTTP surface around it.
"""


class NotegraphError(Exception):
    """Base exception for notegraph."""

    pass


class VaultNotFoundError(NotegraphError):
    """Raised when the configured vault directory does not exist."""

    pass


class FolderNotFoundError(NotegraphError):
    """Raised when a folder query matches no folder in the vault."""

    pass
