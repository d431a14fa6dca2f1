"""Domain error types."""


class DomainValidationError(ValueError):
    """Raised when a record violates a domain invariant."""


class RecordNotFoundError(LookupError):
    """Raised when a referenced record is missing from a snapshot."""


__all__ = ["DomainValidationError", "RecordNotFoundError"]
