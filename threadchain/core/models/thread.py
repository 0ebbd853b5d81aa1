"""Thread endpoint model.

A Thread is one end of a physical fitting: a named standard ("EF", "52",
"M42") tagged with a gender. A male thread mates with the female thread of
the same name; `opposite()` expresses that relation.

Threads render as ``NAME(M)`` / ``NAME(F)`` and `parse_thread` accepts the
same format, so anything printed can be fed back in on the command line.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ..errors import ThreadParseError


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


_GENDER_RANK = {Gender.MALE: 0, Gender.FEMALE: 1}

_THREAD_PATTERN = re.compile(r"^\s*(?P<name>.+?)\s*\((?P<gender>[MmFf])\)\s*$")


@dataclass(frozen=True)
class Thread:
    """A gendered thread standard.

    Equality is structural (same gender, same name). The ordering defined by
    `sort_key` is only used to canonicalize unordered pairs.
    """

    gender: Gender
    name: str

    def opposite(self) -> "Thread":
        """Return the thread this one fits into (same name, flipped gender)."""
        if self.gender == Gender.MALE:
            return Thread(Gender.FEMALE, self.name)
        return Thread(Gender.MALE, self.name)

    @property
    def is_nil(self) -> bool:
        return self == NIL_THREAD

    def sort_key(self) -> tuple[int, str]:
        return (_GENDER_RANK[self.gender], self.name)

    def __lt__(self, other: "Thread") -> bool:
        if not isinstance(other, Thread):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.name}({self.gender.value})"


# Open end of the synthetic start/end markers. The empty name is reserved:
# every public constructor below rejects it.
NIL_THREAD = Thread(Gender.MALE, "")


def _checked_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ThreadParseError("Thread name must be non-empty")
    return name


def male(name: str) -> Thread:
    """Build a male thread, rejecting the reserved empty name."""
    return Thread(Gender.MALE, _checked_name(name))


def female(name: str) -> Thread:
    """Build a female thread, rejecting the reserved empty name."""
    return Thread(Gender.FEMALE, _checked_name(name))


def parse_thread(text: str) -> Thread:
    """Parse a thread from its rendered form.

    Examples:
        "EF(M)" → Thread(MALE, "EF")
        "40.5 (f)" → Thread(FEMALE, "40.5")

    Raises:
        ThreadParseError: If the text is not ``NAME(M)`` or ``NAME(F)``.
    """
    match = _THREAD_PATTERN.match(text)
    if not match:
        raise ThreadParseError(
            f"Invalid thread: {text!r}. Expected format: 'NAME(M)' or 'NAME(F)'"
        )
    gender = Gender(match.group("gender").upper())
    return Thread(gender, _checked_name(match.group("name")))
