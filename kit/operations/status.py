"""Status computation for Kit VCS."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class StatusReport:
    """Snapshot of branches, staging and working tree differences."""
    current_branch: str
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def unstaged(self) -> List[str]:
        """Unstaged modifications as '<path> (modified|deleted)', sorted by path."""
        entries = [(p, 'modified') for p in self.modified]
        entries += [(p, 'deleted') for p in self.deleted]
        return [f"{path} ({kind})" for path, kind in sorted(entries)]

    def format(self) -> str:
        """Render the five status sections."""
        sections = [
            ('Branches', [
                f"*{b}" if b == self.current_branch else b for b in self.branches
            ]),
            ('Staged Files', self.staged),
            ('Removed Files', self.removed),
            ('Modifications Not Staged For Commit', self.unstaged),
            ('Untracked Files', self.untracked),
        ]

        lines = []
        for title, names in sections:
            lines.append(f"=== {title} ===")
            lines.extend(names)
            lines.append('')
        return '\n'.join(lines) + '\n'


def compute_status(repo) -> StatusReport:
    """
    Compare HEAD, the staging area and the working tree.

    A file is modified but not staged when:
    - HEAD tracks it, its working content differs and it isn't staged
    - it is staged for addition with content that differs from the working file

    A file is deleted but not staged when:
    - it is staged for addition but gone from the working tree
    - HEAD tracks it, it is gone and its removal isn't staged

    Args:
        repo: Repository instance

    Returns:
        StatusReport with every list sorted
    """
    refs = repo.refs
    staging = repo.staging
    head_tree = refs.head_commit().tree
    working = repo.worktree.list_files()

    report = StatusReport(
        current_branch=refs.get_current_branch(),
        branches=list(refs.list_branches()),
        staged=sorted(staging.additions),
        removed=sorted(staging.removals),
    )

    for path in sorted(set(head_tree) | set(staging.additions)):
        current = working.get(path)
        if path in staging.additions:
            if current is None:
                report.deleted.append(path)
            elif current != staging.additions[path]:
                report.modified.append(path)
        elif path in staging.removals:
            continue
        elif current is None:
            report.deleted.append(path)
        elif current != head_tree[path]:
            report.modified.append(path)

    for path in working:
        if path in staging.additions:
            continue
        if path not in head_tree or path in staging.removals:
            report.untracked.append(path)

    return report
