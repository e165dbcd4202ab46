"""
Model-level exceptions.

NotFoundError is a werkzeug NotFound, so an uncaught lookup failure becomes a
404 response without any handler code.
"""

from werkzeug.exceptions import NotFound


class NotFoundError(NotFound):
    """No row matched a lookup or search."""

    def __init__(self, description: str):
        super().__init__(description=description)


class ValidationError(ValueError):
    """
    Invalid entity data.

    Attributes:
        errors: Dict mapping field name to error message
    """

    def __init__(self, errors: dict):
        self.errors = dict(errors)
        super().__init__('; '.join(self.errors.values()))
