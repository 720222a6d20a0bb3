"""Defines all exceptions in the package."""


class SpatialBaseException(Exception):
    """Base class for all exceptions in the package"""


class SpatialConfigError(SpatialBaseException):
    """Raised if a configuration value is invalid."""


class SpatialFileExists(SpatialBaseException):
    """Raised if the file already exists."""


class SpatialConflictingArguments(SpatialBaseException):
    """Raised if the arguments are conflict."""
