"""Exception hierarchy shared across SkyRide packages."""


class SkyRideError(Exception):
    """Base exception for SkyRide errors."""

    pass


class ConfigurationError(SkyRideError):
    """A required collaborator or setting is missing at construction time."""

    pass
