class ArraysSupportError(Exception):
    """Base class for every error raised by arrays_support."""


class InvalidArgument(ArraysSupportError, ValueError):
    """Missing array, wrong array kind, bad index or bad range."""


class EmptyInput(ArraysSupportError, ValueError):
    """A scan was asked for on an array with no elements."""


class RangeOverflow(ArraysSupportError, OverflowError):
    """The value span of an array cannot be addressed by a frequency map."""
