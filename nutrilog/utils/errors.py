class NotFoundError(Exception):
    """Referenced row is absent or not visible to the caller."""


class DuplicateFoodError(Exception):
    """A food with the same name already exists in the catalog."""
