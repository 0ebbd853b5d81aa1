"""Exhaustive chain search.

Enumerates every way to bridge a start thread to an end thread with pieces
from an inventory, each piece used at most once per chain. Depth-first with
an explicit stack; every state owns its own used-set and chain, so
backtracking needs no undo step.

Worst case is factorial in the inventory size. Inventories are expected to
hold tens of pieces.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.models import Adapter, Thread
from .chain import Chain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SearchState:
    used: frozenset[Adapter]
    chain: Chain


def make_chain(
    start: Thread,
    end: Thread,
    equipment: Iterable[Adapter],
    *,
    allow_direct: bool = False,
) -> list[Chain]:
    """Find every chain connecting `start` to `end`.

    Args:
        start: Thread on the starting device (the first adapter must mate with it)
        end: Thread on the target device (the last adapter must mate with it)
        equipment: Available adapters; equal adapters count as one piece
        allow_direct: When `start` already mates with `end`, also report the
            marker-only chain, ahead of the chains found through adapters

    Returns:
        Completed chains, boundary markers included, in discovery order.
        Chains using the same pieces in a different order or orientation are
        reported separately.
    """
    equipment = list(dict.fromkeys(equipment))
    seed = Chain.begin(start)
    found: list[Chain] = []

    if allow_direct and seed.open_end.opposite() == end:
        logger.debug("%s mates with %s directly", start, end)
        found.append(seed.close(end))

    stack = [_SearchState(used=frozenset(), chain=seed)]
    expanded = 0

    while stack:
        state = stack.pop()
        expanded += 1
        for adapter in equipment:
            if adapter in state.used:
                continue
            chain = state.chain.add(adapter)
            if chain is None:
                continue
            if chain.open_end.opposite() == end:
                found.append(chain.close(end))
            else:
                stack.append(_SearchState(used=state.used | {adapter}, chain=chain))

    logger.debug(
        "Search %s → %s: %d states expanded, %d chains found",
        start,
        end,
        expanded,
        len(found),
    )
    return found
