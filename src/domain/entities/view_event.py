"""Profile view event entity."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class ViewEvent:
    """A single recorded view of a profile.

    Events are append-only. ``timestamp`` is epoch milliseconds.
    ``viewer`` is None for anonymous visitors and ``viewer_origin`` is None
    when the request origin is unknown.
    """

    viewed: str
    timestamp: int
    viewer: Optional[str] = None
    viewer_origin: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
