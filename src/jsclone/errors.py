"""JavaScript error types and exceptions."""


class JSError(Exception):
    """Base class for all JavaScript errors."""

    def __init__(self, message: str = "", name: str = "Error"):
        self.message = message
        self.name = name
        super().__init__(f"{name}: {message}" if message else name)


class JSTypeError(JSError):
    """JavaScript type error."""

    def __init__(self, message: str = ""):
        super().__init__(message, "TypeError")


class UnsupportedValueError(JSTypeError):
    """Raised when a value cannot be deep-copied.

    Either the value is not part of the JavaScript value model at all, or
    the fallback constructor for an exotic object type refused to build an
    empty instance. In the latter case the original exception is chained.
    """

    def __init__(self, message: str = "", value=None):
        self.value = value
        super().__init__(message)


class RegExpError(JSError):
    """Invalid regular expression pattern or flags."""

    def __init__(self, message: str = ""):
        super().__init__(message, "SyntaxError")
