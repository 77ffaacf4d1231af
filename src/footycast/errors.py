"""Exception types raised by FootyCast."""


class FootyCastError(Exception):
    """Base class for FootyCast errors."""


class UpstreamError(FootyCastError):
    """The prediction provider could not be reached or answered badly."""


class PredictionFetchError(FootyCastError):
    """The UI could not obtain predictions from the FootyCast proxy."""
