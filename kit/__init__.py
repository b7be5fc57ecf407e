"""Kit - A small snapshot-and-pointer version control system in Python."""

__version__ = '0.1.0'

from kit.core.repository import Repository
from kit.core.objects import KitObject, Blob, Commit

__all__ = [
    'Repository',
    'KitObject',
    'Blob',
    'Commit',
]
