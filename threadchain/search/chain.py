"""Chain of adapters and the matching relation used to extend it."""

from dataclasses import dataclass

from ..core.models import NIL_THREAD, Adapter, Thread

START_LABEL = "start"
END_LABEL = "end"


@dataclass(frozen=True)
class Chain:
    """An ordered, non-empty sequence of adapters.

    A chain begins with a synthetic ``(NIL, start)`` marker and, once
    complete, ends with a synthetic ``(end, NIL)`` marker. Adjacent adapters
    always mate: the second end of one is the opposite of the first end of
    the next. Chains are values; `add` and `close` return new chains.
    """

    adapters: tuple[Adapter, ...]

    def __post_init__(self) -> None:
        if not self.adapters:
            raise ValueError("Chain must contain at least one adapter")

    @classmethod
    def begin(cls, start: Thread) -> "Chain":
        return cls((Adapter(NIL_THREAD, start, START_LABEL),))

    @property
    def open_end(self) -> Thread:
        return self.adapters[-1].b

    @property
    def is_complete(self) -> bool:
        return len(self.adapters) >= 2 and self.open_end.is_nil

    @property
    def inner(self) -> tuple[Adapter, ...]:
        """The adapters between the boundary markers."""
        end = -1 if self.is_complete else len(self.adapters)
        return self.adapters[1:end]

    def add(self, candidate: Adapter) -> "Chain | None":
        """Append `candidate` if one of its ends fits the open end.

        The candidate is appended as-is when its first end fits, reversed when
        its second end fits, and rejected otherwise.
        """
        last = self.open_end
        if last == candidate.a.opposite():
            return Chain(self.adapters + (candidate,))
        if last == candidate.b.opposite():
            return Chain(self.adapters + (candidate.reverse(),))
        return None

    def close(self, end: Thread) -> "Chain":
        return Chain(self.adapters + (Adapter(end, NIL_THREAD, END_LABEL),))

    def __len__(self) -> int:
        return len(self.adapters)

    def __iter__(self):
        return iter(self.adapters)

    def __str__(self) -> str:
        return " ".join(f"[{adapter}]" for adapter in self.adapters)
