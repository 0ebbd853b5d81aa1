"""Adapter model: one physical piece with two thread ends."""

from dataclasses import dataclass, replace
from functools import cached_property

from ..errors import InvalidAdapterError, ThreadParseError
from .thread import NIL_THREAD, Thread, parse_thread

REVERSED_SUFFIX = " (reversed)"


@dataclass(frozen=True, eq=False)
class Adapter:
    """An unordered pair of threads plus an optional display label.

    Identity is the unordered pair: Adapter(a, b) == Adapter(b, a) and both
    hash the same, whatever their labels. `reverse()` yields the same piece
    turned around, not a new one.
    """

    a: Thread
    b: Thread
    label: str = ""

    def __post_init__(self) -> None:
        if self.a.is_nil and self.b.is_nil:
            raise InvalidAdapterError("Adapter must have at least one real end")

    @property
    def ends(self) -> tuple[Thread, Thread]:
        return (self.a, self.b)

    def with_label(self, label: str) -> "Adapter":
        return replace(self, label=label)

    def reverse(self) -> "Adapter":
        """Swap the ends, toggling the "(reversed)" marker on a non-empty label."""
        label = self.label
        if label.endswith(REVERSED_SUFFIX):
            label = label[: -len(REVERSED_SUFFIX)]
        elif label:
            label = label + REVERSED_SUFFIX
        return Adapter(self.b, self.a, label)

    @cached_property
    def _canonical(self) -> tuple[tuple[int, str], tuple[int, str]]:
        first, second = sorted((self.a.sort_key(), self.b.sort_key()))
        return (first, second)

    def sort_key(self) -> tuple[tuple[int, str], tuple[int, str]]:
        return self._canonical

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Adapter):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __str__(self) -> str:
        has_a = not self.a.is_nil
        has_b = not self.b.is_nil
        text = ""
        if self.label:
            if has_a and has_b:
                return self.label
            text = f"{self.label}: "
        if has_a:
            text += str(self.a)
            if has_b:
                text += " -> "
        if has_b:
            text += str(self.b)
        return text


def parse_adapter(text: str) -> Adapter:
    """Parse an adapter description.

    Format: ``[LABEL: ]END -> END`` where each END is a thread in
    ``NAME(M)`` / ``NAME(F)`` form.

    Examples:
        "52(M) -> 58(F)"
        "new 52-58: 52(M)->58(F)"

    Raises:
        ThreadParseError: If the text is not a valid adapter description.
    """
    left, sep, right = text.partition("->")
    if not sep:
        raise ThreadParseError(
            f"Invalid adapter: {text!r}. Expected format: '[LABEL: ]A(M) -> B(F)'"
        )
    label = ""
    if ": " in left:
        label, left = left.rsplit(": ", 1)
        label = label.strip()
    return Adapter(parse_thread(left), parse_thread(right), label)
