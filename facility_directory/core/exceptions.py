class FacilityDirectoryError(Exception):
    """Base directory exception."""


class LoadError(FacilityDirectoryError):
    """Raised when the facility collection could not be read."""


class SubmitError(FacilityDirectoryError):
    """Raised when a feedback entry could not be stored."""
