class BugNotFoundError(Exception):
    """Raised when no bug exists with the requested id."""

    def __init__(self, bug_id: int):
        super().__init__(f"Bug {bug_id} not found")
        self.bug_id = bug_id
