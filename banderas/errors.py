"""
Domain exceptions shared by services and API handlers.

Absence is normally reported with ``None``/``False`` return values; these
exceptions cover the cases where an operation cannot report through its
return value.
"""


class BanderasError(Exception):
    """Base class for service-level failures."""


class NotFoundError(BanderasError):
    """A referenced entity does not exist."""


class UserNotFoundError(NotFoundError):
    """The user exists neither locally nor in the identity provider."""


class WelcomeEmailError(BanderasError):
    """The welcome notification could not be delivered."""


class StorageError(BanderasError):
    """The file storage backend rejected or failed an operation."""


class IdentityProviderError(BanderasError):
    """The external identity provider call failed."""
