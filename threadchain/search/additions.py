"""What-if analysis: which new adapter would connect the most thread pairs?

For every adapter that could be built from the threads the inventory already
touches, count how many previously unreachable thread pairs become reachable
once that adapter is added. Brute force: each candidate costs one full
reachability sweep, each sweep one search per thread pair.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import NamedTuple

from ..core.models import Adapter, Thread
from .engine import make_chain

logger = logging.getLogger(__name__)


class Addition(NamedTuple):
    """A hypothetical adapter and the number of thread pairs it newly connects."""

    adapter: Adapter
    count: int


def thread_vocabulary(equipment: Iterable[Adapter]) -> set[Thread]:
    """Threads the inventory can connect to or from.

    Every end present in the inventory, flipped to the thread it mates with.
    """
    return {thread.opposite() for adapter in equipment for thread in adapter.ends}


def candidate_adapters(equipment: Iterable[Adapter]) -> list[Adapter]:
    """Every adapter joining two vocabulary threads, deduplicated and ordered."""
    threads = sorted(thread_vocabulary(equipment), key=Thread.sort_key)
    candidates = {Adapter(a, b) for a in threads for b in threads}
    return sorted(candidates, key=Adapter.sort_key)


def candidate_pairs(equipment: Iterable[Adapter]) -> list[tuple[Thread, Thread]]:
    """The (start, end) pair behind each candidate, in candidate order."""
    pairs = []
    for candidate in candidate_adapters(equipment):
        first, second = sorted(candidate.ends, key=Thread.sort_key)
        pairs.append((first, second))
    return pairs


def count_reachable(
    pairs: Iterable[tuple[Thread, Thread]],
    equipment: Sequence[Adapter],
    *,
    allow_direct: bool = False,
) -> int:
    """Number of pairs connected by at least one chain."""
    return sum(
        1
        for start, end in pairs
        if make_chain(start, end, equipment, allow_direct=allow_direct)
    )


def find_useful_additions(
    equipment: Sequence[Adapter],
    *,
    allow_direct: bool = False,
    on_progress: Callable[[int, int], None] | None = None,
) -> list[Addition]:
    """Score every candidate adapter by the thread pairs it newly connects.

    Args:
        equipment: Current inventory (not modified)
        allow_direct: Passed through to `make_chain`
        on_progress: Optional callback(done, total) after each candidate

    Returns:
        One Addition per candidate, sorted ascending by count so the most
        useful candidates come last. Ties keep the canonical candidate order.
    """
    candidates = candidate_adapters(equipment)
    pairs = candidate_pairs(equipment)

    baseline = count_reachable(pairs, equipment, allow_direct=allow_direct)
    logger.info(
        "Scoring %d candidate adapters over %d thread pairs (%d reachable now)",
        len(candidates),
        len(pairs),
        baseline,
    )

    results: list[Addition] = []
    trial = list(equipment)
    for i, candidate in enumerate(candidates, 1):
        trial.append(candidate)
        count = count_reachable(pairs, trial, allow_direct=allow_direct)
        trial.pop()
        results.append(Addition(candidate, count - baseline))
        if on_progress:
            on_progress(i, len(candidates))

    results.sort(key=lambda addition: addition.count)
    return results


def render_addition(addition: Addition) -> str:
    return f"{addition.adapter}: {addition.count} new chains"
