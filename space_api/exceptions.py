class ShipServiceError(Exception):
    """Base class for errors raised by the ship service layer."""


class ValidationError(ShipServiceError):
    """Raised when a request carries a missing, malformed or out-of-range value."""


class NotFoundError(ShipServiceError):
    """Raised when no ship is stored under the requested id."""
