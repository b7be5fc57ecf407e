"""Remote module for distributed Kit operations.

This module handles all remote-related functionality:
- Remote registry (add, remove, list)
- Push, fetch and pull against local filesystem remotes
"""

from kit.remote.remote import RemoteManager

__all__ = [
    'RemoteManager',
]
