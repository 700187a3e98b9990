# filters/errors.py


class FilterError(Exception):
    """Base class for convolution engine errors."""


class InvalidParameterError(FilterError, ValueError):
    """sigma (or another filter parameter) is unusable: <= 0, NaN, inf."""


class MalformedImageError(FilterError, ValueError):
    """Pixel buffer does not match the declared width/height."""
