"""Version-control gateway used by the approval workflow."""

from arc_commit.git import staged


class GitGateway:
    """Thin object wrapper over the staged-change functions.

    The workflow depends on this three-method shape only, so tests can
    substitute any object providing the same methods.
    """

    def has_staged_changes(self) -> bool:
        return staged.has_staged_changes()

    def fetch_staged_diff(self) -> str:
        return staged.get_staged_diff()

    def commit(self, message: str) -> str:
        return staged.create_commit(message)
