"""Chain search and addition analysis."""

from .chain import Chain, START_LABEL, END_LABEL
from .engine import make_chain
from .additions import (
    Addition,
    thread_vocabulary,
    candidate_adapters,
    candidate_pairs,
    count_reachable,
    find_useful_additions,
    render_addition,
)

__all__ = [
    "Chain",
    "START_LABEL",
    "END_LABEL",
    "make_chain",
    "Addition",
    "thread_vocabulary",
    "candidate_adapters",
    "candidate_pairs",
    "count_reachable",
    "find_useful_additions",
    "render_addition",
]
