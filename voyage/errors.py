"""Domain exceptions."""


class VoyageError(Exception):
    """Base class for itinerary domain errors."""

    pass


class ConfigurationError(VoyageError):
    """Input configuration cannot produce a valid itinerary."""

    pass


class EmptyCityListError(ConfigurationError):
    """Day generation was asked to assign cities from an empty list."""

    pass


class InvalidDateRangeError(VoyageError):
    """Trip end date precedes its start date."""

    pass
