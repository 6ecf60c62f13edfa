"""Error types for the portfolio core.

The core has almost no runtime failure surface: every operation is total
once its preconditions hold. What remains is caller misuse (an index outside
the project list, an empty project list) and bad deployment settings. Each
error carries an ``ErrorCategory`` so the HTTP layer can map it to a status
code without string matching.

Example:
    from src.core.errors import InvalidArgumentError

    try:
        controller.go_to(index)
    except InvalidArgumentError as ex:
        raise HTTPException(status_code=400, detail=ex.message) from ex
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of portfolio errors for handling decisions."""

    INVALID_INPUT = auto()  # Caller passed an argument outside its domain
    CONFIGURATION = auto()  # Environment or content file is unusable
    UNKNOWN = auto()


class PortfolioError(Exception):
    """Base class for errors raised by the portfolio core.

    Attributes:
        message: Human readable description.
        category: The ErrorCategory of this error.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(PortfolioError, ValueError):
    """An argument was rejected before any state was mutated.

    Attributes:
        argument: Name of the offending argument.
        value: The rejected value.
    """

    category = ErrorCategory.INVALID_INPUT

    def __init__(self, message: str, argument: str, value: object = None) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


class ConfigurationError(PortfolioError):
    """A setting or content file could not be used.

    Attributes:
        setting: The environment variable or path that failed.
    """

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message)
        self.setting = setting


def classify_error(error: Exception) -> ErrorCategory:
    """Return the category of an error, UNKNOWN for foreign exceptions."""
    if isinstance(error, PortfolioError):
        return error.category
    return ErrorCategory.UNKNOWN
