class ValidationError(ValueError):
    """Input rejected before any store call."""


class NotFoundError(LookupError):
    pass


class StoreError(RuntimeError):
    """A write or read against the database failed."""

    def __init__(self, message, original=None):
        super().__init__(message)
        self.original = original
