"""Commit history walking and formatting for Kit VCS."""

from datetime import datetime, timedelta, timezone
from typing import Iterator, List, Tuple
from kit.core.objects import Commit


def parse_offset(offset: str) -> timezone:
    """Turn a '+HHMM' / '-HHMM' offset into a tzinfo."""
    sign = -1 if offset.startswith('-') else 1
    digits = offset.lstrip('+-').zfill(4)
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:4]))
    return timezone(sign * delta)


def format_timestamp(commit: Commit) -> str:
    """
    Format a commit's timestamp in its own timezone.

    Example: 'Thu Jan 1 00:00:00 1970 +0000'
    """
    tz = parse_offset(commit.timezone)
    dt = datetime.fromtimestamp(commit.timestamp, tz)
    return f"{dt:%a %b} {dt.day} {dt:%H:%M:%S %Y} {commit.timezone}"


def format_log_entry(commit_hash: str, commit: Commit) -> str:
    """
    Render one log record.

    Format:
    ===
    commit <hash>
    Merge: <parent1[:7]> <parent2[:7]>    (merge commits only)
    Date: <date>
    <message>
    <blank line>
    """
    lines = ['===', f'commit {commit_hash}']
    if commit.is_merge:
        lines.append(f'Merge: {commit.parent[:7]} {commit.branch_parent[:7]}')
    lines.append(f'Date: {format_timestamp(commit)}')
    lines.append(commit.message)
    lines.append('')
    return '\n'.join(lines)


def walk_first_parent(repo, start_hash: str) -> Iterator[Tuple[str, Commit]]:
    """Yield (hash, commit) from start_hash back along primary parents."""
    commit_hash = start_hash
    while commit_hash:
        commit = repo.get_commit(commit_hash)
        yield commit_hash, commit
        commit_hash = commit.parent


def iter_commits(repo) -> Iterator[Tuple[str, Commit]]:
    """Yield every commit in the store, sorted by hash."""
    for commit_hash in repo.list_commits():
        yield commit_hash, repo.get_commit(commit_hash)


def find_by_message(repo, message: str) -> List[str]:
    """Hashes of all commits whose message equals message exactly."""
    return [h for h, commit in iter_commits(repo) if commit.message == message]
