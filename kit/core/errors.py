"""Kit exception hierarchy.

Every error a command can report inherits from KitError. The message of
each exception is the single line printed to the user.
"""


class KitError(Exception):
    """Base exception for all Kit errors."""

    message = "Unknown error."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class NotInitialized(KitError):
    message = "Not in an initialized Kit directory."


class AlreadyInitialized(KitError):
    message = "A Kit version-control system already exists in the current directory."


class BadArgs(KitError):
    message = "Incorrect operands."


class FileMissing(KitError):
    message = "File does not exist."


class NothingToRemove(KitError):
    message = "No reason to remove the file."


class EmptyMessage(KitError):
    message = "Please enter a commit message."


class NoChanges(KitError):
    message = "No changes added to the commit."


class NoSuchBranch(KitError):
    message = "No such branch exists."


class BranchExists(KitError):
    message = "A branch with that name already exists."


class BadBranchName(KitError):
    """Raised for names that are malformed or clash with a nested branch."""

    message = "Not a valid branch name."

    def __init__(self, name: str = None, message: str = None):
        self.name = name
        super().__init__(message)


class CannotRemoveCurrent(KitError):
    message = "Cannot remove the current branch."


class AlreadyOnBranch(KitError):
    message = "No need to checkout the current branch."


class NotInCommit(KitError):
    message = "File does not exist in that commit."


class NoSuchCommit(KitError):
    message = "No commit with that id exists."


class UntrackedConflict(KitError):
    message = "There is an untracked file in the way; delete it, or add and commit it first."

    def __init__(self, path: str = None):
        self.path = path
        super().__init__()


class SelfMerge(KitError):
    message = "Cannot merge a branch with itself."


class UncommittedChanges(KitError):
    message = "You have uncommitted changes."


class RemoteMissing(KitError):
    message = "Remote directory not found."


class NoSuchRemoteBranch(KitError):
    message = "That remote does not have that branch."


class PushNotFastForward(KitError):
    message = "Please pull down remote changes before pushing."


class RemoteExists(KitError):
    message = "A remote with that name already exists."


class NoSuchRemote(KitError):
    message = "A remote with that name does not exist."


class ObjectNotFound(KitError):
    """Raised when a blob or commit lookup fails."""

    def __init__(self, kind: str, obj_hash: str):
        self.kind = kind
        self.obj_hash = obj_hash
        super().__init__(f"{kind.capitalize()} {obj_hash} not found.")
