"""Upstream adapter - third-party restaurant and menu source."""

from apps.web.upstream.adapter import SwiggyAdapter
from apps.web.upstream.exceptions import UpstreamError

__all__ = [
    "SwiggyAdapter",
    "UpstreamError",
]
