"""Operations that an instruction applies to a region of lights."""

from __future__ import annotations

from enum import Enum


class Operation(Enum):
    """What to do with the lights in a region."""

    OFF = 0
    ON = 1
    TOGGLE = 2

    @classmethod
    def from_text(cls, text: str) -> Operation:
        """Pick the operation named in an instruction line.

        Text mentioning "off" turns lights off, otherwise text mentioning
        "on" turns them on, and anything else toggles.
        """
        if "off" in text:
            return cls.OFF
        if "on" in text:
            return cls.ON
        return cls.TOGGLE