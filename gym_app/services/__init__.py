from .errors import NotFoundError, StoreError, ValidationError

__all__ = ["NotFoundError", "StoreError", "ValidationError"]
