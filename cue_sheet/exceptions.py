"""Exception classes for CUE sheet handling."""


class CueError(Exception):
    """Base exception for all CUE-related errors."""


class CueParsingError(CueError):
    """Raised when a CUE file cannot be read."""


class InvalidTimeFormatError(CueError):
    """Raised when a time string is in invalid format."""


class TimeArithmeticError(CueError):
    """Raised when time arithmetic would produce a negative time."""


class InvalidCommandError(CueError):
    """Raised when a CUE command is invalid or malformed."""
