"""Generation timestamps attached to query records."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Timestamp:
    """A UTC wall-clock time with millisecond precision."""

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Timestamp":
        """Build from a datetime; aware values are converted to UTC first."""
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hours=moment.hour,
            minutes=moment.minute,
            seconds=moment.second,
            milliseconds=moment.microsecond // 1000,
        )

    @classmethod
    def now(cls, clock: Optional[Callable[[], datetime]] = None) -> "Timestamp":
        return cls.from_datetime((clock or _utc_now)())

    def __str__(self) -> str:
        # Milliseconds follow a colon, not a period.
        return (
            f"{self.year:04}-{self.month:02}-{self.day:02}"
            f"T{self.hours:02}:{self.minutes:02}:{self.seconds:02}"
            f":{self.milliseconds:03}"
        )
