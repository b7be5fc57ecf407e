"""Operations module for high-level Kit operations.

This module contains the business logic for Kit operations like:
- Commit creation
- Checkout, reset and branch management
- Merge algorithms
- Status computation
- History walking
"""

from kit.operations.commit import CommitEngine
from kit.operations.checkout import Navigator
from kit.operations.merge import MergeEngine, MergeResult
from kit.operations.status import StatusReport, compute_status
from kit.operations.history import walk_first_parent, format_log_entry, find_by_message

__all__ = [
    'CommitEngine',
    'Navigator',
    'MergeEngine', 'MergeResult',
    'StatusReport', 'compute_status',
    'walk_first_parent', 'format_log_entry', 'find_by_message',
]
