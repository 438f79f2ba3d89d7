"""Time representations used by CUE sheets.

CUE timing fields (INDEX, PREGAP, POSTGAP) are always minutes:seconds:frames
with 75 frames per second, modelled by :class:`CueTime`. The hour-based
:class:`HMSTime` exists for derived views such as timelines and is never used
for on-disk timing fields.

Example usage:
    >>> t = parse_msf_time("01:30:45")
    >>> msf_to_seconds(t)
    90.6
    >>> format_msf_time(add_msf_time(t, CueTime(0, 0, 30)))
    '01:31:00'
"""

import functools
import re
from dataclasses import dataclass

from .exceptions import InvalidTimeFormatError, TimeArithmeticError

FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
FRAMES_PER_MINUTE = FRAMES_PER_SECOND * SECONDS_PER_MINUTE

# Three colon-separated integers; the sign is accepted so negatives get a precise message
_TRIPLE_PATTERN = re.compile(r"^([+-]?\d+):([+-]?\d+):([+-]?\d+)$", re.ASCII)


def _split_triple(time_str: str, label: str, expected: str) -> tuple[int, int, int]:
    """Split a time string into three non-negative integers."""
    match = _TRIPLE_PATTERN.match(time_str.strip())
    if not match:
        raise InvalidTimeFormatError(f'Invalid {label} time format: "{time_str}". Expected format: "{expected}"')

    first, second, third = (int(group) for group in match.groups())
    if first < 0 or second < 0 or third < 0:
        raise InvalidTimeFormatError(f'Invalid {label} time format: "{time_str}". All parts must be non-negative.')

    return first, second, third


@functools.total_ordering
@dataclass(frozen=True)
class CueTime:
    """Represents a time in CUE format (MM:SS:FF where FF is frames at 75fps)."""

    minutes: int
    seconds: int
    frames: int

    def __post_init__(self) -> None:
        """Validate time values."""
        if self.minutes < 0:
            raise InvalidTimeFormatError(f"Invalid minutes: {self.minutes}")
        if self.seconds < 0 or self.seconds >= SECONDS_PER_MINUTE:
            raise InvalidTimeFormatError(f"Invalid seconds: {self.seconds} (must be 0-59)")
        if self.frames < 0 or self.frames >= FRAMES_PER_SECOND:
            raise InvalidTimeFormatError(f"Invalid frames: {self.frames} (must be 0-74)")

    @classmethod
    def from_string(cls, time_str: str) -> "CueTime":
        """Parse time from MM:SS:FF format.

        Args:
            time_str: Time string in MM:SS:FF format (fields need not be zero-padded)

        Returns:
            CueTime instance

        Raises:
            InvalidTimeFormatError: If format is invalid or a field is out of range
        """
        minutes, seconds, frames = _split_triple(time_str, "MSF", "mm:ss:ff")

        if seconds >= SECONDS_PER_MINUTE:
            raise InvalidTimeFormatError(f'Invalid MSF time format: "{time_str}". Seconds must be less than 60.')
        if frames >= FRAMES_PER_SECOND:
            raise InvalidTimeFormatError(f'Invalid MSF time format: "{time_str}". Frames must be less than 75.')

        return cls(minutes=minutes, seconds=seconds, frames=frames)

    @classmethod
    def from_frames(cls, total_frames: int) -> "CueTime":
        """Create CueTime from total frames.

        Args:
            total_frames: Total number of frames

        Returns:
            CueTime instance
        """
        if total_frames < 0:
            raise InvalidTimeFormatError(f"Frame count must be non-negative, got {total_frames}")

        minutes = total_frames // FRAMES_PER_MINUTE
        remaining_frames = total_frames % FRAMES_PER_MINUTE
        seconds = remaining_frames // FRAMES_PER_SECOND
        frames = remaining_frames % FRAMES_PER_SECOND

        return cls(minutes=minutes, seconds=seconds, frames=frames)

    @classmethod
    def from_seconds(cls, seconds: float) -> "CueTime":
        """Create CueTime from seconds, rounding to the nearest frame."""
        if seconds < 0:
            raise InvalidTimeFormatError(f"Seconds must be non-negative, got {seconds}")
        return cls.from_frames(round(seconds * FRAMES_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, ms: int) -> "CueTime":
        """Create CueTime from milliseconds.

        Args:
            ms: Time in milliseconds

        Returns:
            CueTime instance (partial frames are dropped)
        """
        return cls.from_frames((ms * FRAMES_PER_SECOND) // 1000)

    def to_frames(self) -> int:
        """Convert to total frames."""
        return self.minutes * FRAMES_PER_MINUTE + self.seconds * FRAMES_PER_SECOND + self.frames

    def to_seconds(self) -> float:
        """Convert to seconds, including the fractional frame part."""
        return self.minutes * SECONDS_PER_MINUTE + self.seconds + self.frames / FRAMES_PER_SECOND

    def to_milliseconds(self) -> int:
        """Convert to milliseconds."""
        return (self.to_frames() * 1000) // FRAMES_PER_SECOND

    def format(self, zero_pad: bool = True) -> str:
        """Render as ``mm:ss:ff``, optionally without zero-padding."""
        if zero_pad:
            return f"{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"
        return f"{self.minutes}:{self.seconds}:{self.frames}"

    def __str__(self) -> str:
        """String representation in MM:SS:FF format."""
        return self.format()

    def __repr__(self) -> str:
        """Developer representation."""
        return f"CueTime({self.minutes}:{self.seconds:02d}:{self.frames:02d})"

    def __hash__(self) -> int:
        """Return hash of time components."""
        return hash(self.to_frames())

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if not isinstance(other, CueTime):
            return NotImplemented
        return self.to_frames() == other.to_frames()

    def __lt__(self, other: object) -> bool:
        """Less than comparison."""
        if not isinstance(other, CueTime):
            return NotImplemented
        return self.to_frames() < other.to_frames()

    def __add__(self, other: object) -> "CueTime":
        if not isinstance(other, CueTime):
            return NotImplemented
        return CueTime.from_frames(self.to_frames() + other.to_frames())

    def __sub__(self, other: object) -> "CueTime":
        if not isinstance(other, CueTime):
            return NotImplemented
        difference = self.to_frames() - other.to_frames()
        if difference < 0:
            raise TimeArithmeticError(f"Cannot subtract {other} from {self}: result would be negative")
        return CueTime.from_frames(difference)


@functools.total_ordering
@dataclass(frozen=True)
class HMSTime:
    """Represents a wall-clock style time (HH:MM:SS)."""

    hours: int
    minutes: int
    seconds: int

    def __post_init__(self) -> None:
        """Validate time values."""
        if self.hours < 0:
            raise InvalidTimeFormatError(f"Invalid hours: {self.hours}")
        if self.minutes < 0 or self.minutes >= 60:
            raise InvalidTimeFormatError(f"Invalid minutes: {self.minutes} (must be 0-59)")
        if self.seconds < 0 or self.seconds >= 60:
            raise InvalidTimeFormatError(f"Invalid seconds: {self.seconds} (must be 0-59)")

    @classmethod
    def from_string(cls, time_str: str) -> "HMSTime":
        """Parse time from HH:MM:SS format.

        Raises:
            InvalidTimeFormatError: If format is invalid or a field is out of range
        """
        hours, minutes, seconds = _split_triple(time_str, "HMS", "hh:mm:ss")

        if minutes >= 60:
            raise InvalidTimeFormatError(f'Invalid HMS time format: "{time_str}". Minutes must be less than 60.')
        if seconds >= 60:
            raise InvalidTimeFormatError(f'Invalid HMS time format: "{time_str}". Seconds must be less than 60.')

        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def from_seconds(cls, total_seconds: float) -> "HMSTime":
        """Create HMSTime from seconds, dropping any fractional part."""
        if total_seconds < 0:
            raise InvalidTimeFormatError(f"Seconds must be non-negative, got {total_seconds}")

        whole = int(total_seconds)
        return cls(
            hours=whole // SECONDS_PER_HOUR,
            minutes=(whole % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE,
            seconds=whole % SECONDS_PER_MINUTE,
        )

    def to_seconds(self) -> int:
        """Convert to total seconds."""
        return self.hours * SECONDS_PER_HOUR + self.minutes * SECONDS_PER_MINUTE + self.seconds

    def format(self, zero_pad: bool = True) -> str:
        """Render as ``hh:mm:ss``, optionally without zero-padding."""
        if zero_pad:
            return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
        return f"{self.hours}:{self.minutes}:{self.seconds}"

    def __str__(self) -> str:
        return self.format()

    def __hash__(self) -> int:
        return hash(self.to_seconds())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HMSTime):
            return NotImplemented
        return self.to_seconds() == other.to_seconds()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HMSTime):
            return NotImplemented
        return self.to_seconds() < other.to_seconds()

    def __add__(self, other: object) -> "HMSTime":
        if not isinstance(other, HMSTime):
            return NotImplemented
        return HMSTime.from_seconds(self.to_seconds() + other.to_seconds())

    def __sub__(self, other: object) -> "HMSTime":
        if not isinstance(other, HMSTime):
            return NotImplemented
        difference = self.to_seconds() - other.to_seconds()
        if difference < 0:
            raise TimeArithmeticError(f"Cannot subtract {other} from {self}: result would be negative")
        return HMSTime.from_seconds(difference)


def _compare(first: int, second: int) -> int:
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def parse_msf_time(time_str: str) -> CueTime:
    """Parse a ``m:s:f`` string into a CueTime."""
    return CueTime.from_string(time_str)


def format_msf_time(time: CueTime, zero_pad: bool = True) -> str:
    """Format a CueTime as ``mm:ss:ff``."""
    return time.format(zero_pad=zero_pad)


def msf_to_seconds(time: CueTime) -> float:
    """Convert a CueTime to seconds, including fractional frames."""
    return time.to_seconds()


def seconds_to_msf(seconds: float) -> CueTime:
    """Convert seconds to a CueTime, rounding to the nearest frame."""
    return CueTime.from_seconds(seconds)


def msf_to_frames(time: CueTime) -> int:
    """Convert a CueTime to a total frame count."""
    return time.to_frames()


def frames_to_msf(total_frames: int) -> CueTime:
    """Convert a total frame count to a CueTime."""
    return CueTime.from_frames(total_frames)


def add_msf_time(first: CueTime, second: CueTime) -> CueTime:
    """Add two CueTimes."""
    return first + second


def subtract_msf_time(first: CueTime, second: CueTime) -> CueTime:
    """Subtract ``second`` from ``first``.

    Raises:
        TimeArithmeticError: If the result would be negative
    """
    return first - second


def compare_msf_time(first: CueTime, second: CueTime) -> int:
    """Return -1, 0 or 1 as ``first`` is before, equal to or after ``second``."""
    return _compare(first.to_frames(), second.to_frames())


def parse_hms_time(time_str: str) -> HMSTime:
    """Parse a ``h:m:s`` string into an HMSTime."""
    return HMSTime.from_string(time_str)


def format_hms_time(time: HMSTime, zero_pad: bool = True) -> str:
    """Format an HMSTime as ``hh:mm:ss``."""
    return time.format(zero_pad=zero_pad)


def hms_to_seconds(time: HMSTime) -> int:
    """Convert an HMSTime to whole seconds."""
    return time.to_seconds()


def seconds_to_hms(seconds: float) -> HMSTime:
    """Convert seconds to an HMSTime, truncating fractional seconds."""
    return HMSTime.from_seconds(seconds)


def add_hms_time(first: HMSTime, second: HMSTime) -> HMSTime:
    """Add two HMSTimes."""
    return first + second


def subtract_hms_time(first: HMSTime, second: HMSTime) -> HMSTime:
    """Subtract ``second`` from ``first``.

    Raises:
        TimeArithmeticError: If the result would be negative
    """
    return first - second


def compare_hms_time(first: HMSTime, second: HMSTime) -> int:
    """Return -1, 0 or 1 as ``first`` is before, equal to or after ``second``."""
    return _compare(first.to_seconds(), second.to_seconds())
