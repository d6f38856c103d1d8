from __future__ import annotations

import threading
from typing import Iterable

PUBLISHED_SLUGS = (
    "building-scalable-nextjs-apps-2024",
    "cybersecurity-ai-implementation-guide",
)


class ViewCounter:
    """In-memory per-slug view counts; lost on restart."""

    def __init__(self, slugs: Iterable[str] = PUBLISHED_SLUGS):
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {slug: 0 for slug in slugs}

    def increment(self, slug: str) -> int:
        with self._lock:
            value = self._counts.get(slug, 0) + 1
            self._counts[slug] = value
            return value

    def get(self, slug: str) -> int:
        with self._lock:
            return self._counts.get(slug, 0)
