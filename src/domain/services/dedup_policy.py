"""Time-windowed deduplication of profile views."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from domain.entities.view_event import ViewEvent

# Repeat views from one origin inside this window are counted once.
VIEW_DEDUP_WINDOW_MS = 2 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class DedupDecision:
    """Outcome of :func:`decide`."""

    should_record: bool
    count: int


def decide(
    prior_events: Sequence[ViewEvent],
    viewer_origin: Optional[str],
    now: int,
    window_ms: int = VIEW_DEDUP_WINDOW_MS,
) -> DedupDecision:
    """Decide whether a candidate view should be appended to the ledger.

    Args:
        prior_events: Every recorded view of the profile.
        viewer_origin: Network origin of the candidate view, or None.
        now: Candidate timestamp in epoch milliseconds.
        window_ms: Dedup window length in milliseconds.

    Returns:
        The decision plus the view count to report. ``count`` includes the
        candidate only when it is to be recorded.
    """
    total = len(prior_events)

    # Without an origin there is no dedup key, so the view is never stored.
    if viewer_origin is None:
        return DedupDecision(should_record=False, count=total)

    same_origin = [e.timestamp for e in prior_events if e.viewer_origin == viewer_origin]
    if not same_origin or now - max(same_origin) > window_ms:
        return DedupDecision(should_record=True, count=total + 1)

    return DedupDecision(should_record=False, count=total)
