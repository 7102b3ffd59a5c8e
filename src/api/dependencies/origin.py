"""Viewer origin dependency for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from core.config import settings


def get_viewer_origin(request: Request) -> str | None:
    """Resolve the network origin of the caller.

    Returns None when the transport does not expose a peer address, which
    makes the view anonymous for dedup purposes.
    """
    if settings.trust_proxy_headers:
        forwarded = request.headers.get("X-Forwarded-For", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    if request.client is None:
        return None
    return request.client.host


ViewerOrigin = Annotated[str | None, Depends(get_viewer_origin)]
