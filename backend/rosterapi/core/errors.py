class NotFoundError(Exception):
    """A lookup by name found no matching row."""

    entity = "Record"

    def __init__(self, key):
        self.key = key
        super().__init__(f"{self.entity} not found: {key}")


class TeamNotFound(NotFoundError):
    entity = "Team"


class PlayerNotFound(NotFoundError):
    entity = "Player"
