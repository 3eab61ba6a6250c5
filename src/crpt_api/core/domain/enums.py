from __future__ import annotations

from enum import Enum


class PeriodUnit(Enum):
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @classmethod
    def from_str(cls, value: str) -> "PeriodUnit":
        """Parse a unit name, case-insensitively.

        Accepts the enum value ("seconds") or member name ("SECONDS").
        Raises ValueError for anything else.
        """
        return cls(value)

    @classmethod
    def _missing_(cls, value: object) -> "PeriodUnit | None":
        if isinstance(value, str):
            s = value.strip().lower()
            for unit in cls:
                if unit.value == s:
                    return unit
        return None

    def to_seconds(self, count: int | float = 1) -> float:
        return count * _SECONDS_PER_UNIT[self]


_SECONDS_PER_UNIT: dict[PeriodUnit, float] = {
    PeriodUnit.NANOSECONDS: 1e-9,
    PeriodUnit.MICROSECONDS: 1e-6,
    PeriodUnit.MILLISECONDS: 1e-3,
    PeriodUnit.SECONDS: 1.0,
    PeriodUnit.MINUTES: 60.0,
    PeriodUnit.HOURS: 3600.0,
    PeriodUnit.DAYS: 86400.0,
}


class DocumentType(Enum):
    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"
