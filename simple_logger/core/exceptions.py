"""
Logger exceptions

All errors raised by the logger itself derive from LoggerError.
"""


class LoggerError(Exception):
    """Base class for errors raised by the logger system."""


class InvalidArgumentError(LoggerError, ValueError):
    """
    Raised for programmer errors detected at construction or call time.

    Examples: an empty handler list, a handler that does not extend
    BaseHandler, a non-callable injector or an unknown log level.
    """
