"""Retention selection over a set of timestamped backup files.

The sweep walks the retention boundaries from the most recent to the oldest
and, for each one, picks the newest candidate strictly older than it. What
happens to the picked candidates depends on the strategy:

``evict-boundary``
    The picked candidates are removed and everything else is kept. At most
    one file per boundary is removed in a run.

``retain-boundary``
    The picked candidates are kept and everything else is removed, leaving
    roughly one copy per age bucket.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta

from autoclear.models import CandidateFile, Partition

BOUNDARY_OFFSETS = (
    timedelta(days=0),
    timedelta(days=1),
    timedelta(weeks=1),
    timedelta(weeks=4),
    timedelta(weeks=52),
    timedelta(weeks=104),
)
DEFAULT_STRATEGY = "evict-boundary"


def retention_boundaries(now: datetime) -> tuple[datetime, ...]:
    return tuple(now - offset for offset in BOUNDARY_OFFSETS)


def order_candidates(candidates: Iterable[CandidateFile]) -> tuple[CandidateFile, ...]:
    # Newest first; equal timestamps fall back to file name order.
    by_name = sorted(candidates, key=lambda c: c.path.name)
    return tuple(sorted(by_name, key=lambda c: c.modified_time, reverse=True))


def boundary_hits(
    ordered: Sequence[CandidateFile],
    boundaries: Sequence[datetime],
) -> list[int | None]:
    """Index of the first candidate strictly older than each boundary.

    ``ordered`` must already be newest first. A boundary that no candidate is
    older than yields ``None``. Two boundaries may share the same index.
    """
    hits: list[int | None] = []
    for boundary in boundaries:
        hit = None
        for index, candidate in enumerate(ordered):
            if candidate.modified_time < boundary:
                hit = index
                break
        hits.append(hit)
    return hits


def _evict_boundary(hit: set[int], count: int) -> set[int]:
    return hit


def _retain_boundary(hit: set[int], count: int) -> set[int]:
    return set(range(count)) - hit


STRATEGIES: dict[str, Callable[[set[int], int], set[int]]] = {
    "evict-boundary": _evict_boundary,
    "retain-boundary": _retain_boundary,
}


def select(
    candidates: Iterable[CandidateFile],
    boundaries: Sequence[datetime],
    strategy: str = DEFAULT_STRATEGY,
) -> Partition:
    try:
        removal_rule = STRATEGIES[strategy]
    except KeyError:
        choices = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"unknown strategy {strategy!r} (expected one of: {choices})") from None
    _check_decreasing(boundaries)

    ordered = order_candidates(candidates)
    hits = boundary_hits(ordered, boundaries)
    hit_set = {index for index in hits if index is not None}
    to_remove = removal_rule(hit_set, len(ordered))

    log: list[str] = []
    for boundary, index in zip(boundaries, hits):
        if index is None:
            log.append(f"boundary {boundary.isoformat()}: no file older than boundary")
            continue
        fate = "remove" if index in to_remove else "keep"
        log.append(f"boundary {boundary.isoformat()}: {fate} {ordered[index].path}")

    keep = tuple(c for i, c in enumerate(ordered) if i not in to_remove)
    remove = tuple(c for i, c in enumerate(ordered) if i in to_remove)
    return Partition(keep=keep, remove=remove, log=tuple(log))


def _check_decreasing(boundaries: Sequence[datetime]) -> None:
    for newer, older in zip(boundaries, boundaries[1:]):
        if not older < newer:
            raise ValueError("retention boundaries must be strictly decreasing")
