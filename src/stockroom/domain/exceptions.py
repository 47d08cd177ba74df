"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input value violates an item invariant."""


class InvalidNameError(ValidationError):
    """Item name is empty or too long."""


class InvalidQuantityError(ValidationError):
    """Quantity is not an integer or is outside the allowed range."""


class InvalidPriceError(ValidationError):
    """Price is not a number or is outside the allowed range."""


class ItemNotFoundError(DomainException):
    """No item matches the requested name."""


class CapacityExceededError(DomainException):
    """The inventory already holds the maximum number of items."""


class DuplicateItemError(DomainException):
    """An item with the same name is already present (load time only)."""


class MalformedRecordError(DomainException):
    """A stored record could not be parsed."""


class StorageError(DomainException):
    """Base class for failures of the backing file."""


class ReadError(StorageError):
    """An existing inventory file could not be read."""


class WriteError(StorageError):
    """The inventory file could not be written."""
