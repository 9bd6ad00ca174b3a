"""Custom exceptions for classification and placement errors."""


class ClassifilesError(Exception):
    """Base class for all classifiles errors."""

    pass


class PreconditionError(ClassifilesError):
    """A run precondition is not met (output directory missing, etc.)."""

    pass


class PlacementError(ClassifilesError):
    """No free output name could be found for a link."""

    pass


class ConfigError(ClassifilesError):
    """Configuration file cannot be parsed or validated."""

    pass
