"""Error types raised by the food waste tracker."""


class FoodWasteError(Exception):
    """Base class for application errors."""


class InvalidInputError(FoodWasteError, ValueError):
    """A field is malformed or out of range."""


class NotFoundError(FoodWasteError, LookupError):
    """The referenced entity is absent or not owned by the caller."""


class SensorUnavailableError(FoodWasteError):
    """The weight sensor could not be read."""


class PersistenceError(FoodWasteError, RuntimeError):
    """The underlying store failed."""
