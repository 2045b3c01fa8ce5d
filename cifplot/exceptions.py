"""
Exceptions raised while reshaping and plotting survival results
"""


class CifPlotError(Exception):
    """Base class for all cifplot errors"""


class UnsupportedInputKind(CifPlotError, TypeError):
    """Raised when the object passed for plotting is not a known result kind"""


class InvalidResultShape(CifPlotError, ValueError):
    """Raised when the arrays of a result object do not line up"""


class MalformedGroupEventName(CifPlotError, ValueError):
    """Raised when a curve name cannot be split into a group and an event"""
