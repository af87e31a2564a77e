"""Service-level errors."""


class ProfileNotFoundError(LookupError):
    """Raised when a user has no profile row."""


class ProfileIncompleteError(ValueError):
    """Raised when a profile lacks the metrics needed to compute targets."""


class FoodNotFoundError(LookupError):
    """Raised when a food does not exist or is not visible to the user."""
