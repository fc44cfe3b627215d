from .exceptions import (
    DomainException,
    DuplicateResourceException,
    NullArgumentException,
    OperationCancelledException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "NullArgumentException",
    "ResourceNotFoundException",
    "DuplicateResourceException",
    "StoreException",
    "OperationCancelledException",
]
