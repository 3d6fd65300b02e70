"""Peak memory usage of the running process."""

from __future__ import annotations

import sys

DEFAULT_BALLAST_KIB = 131072


def _max_rss_kib() -> int:
    try:
        import resource
    except ImportError as exc:
        raise RuntimeError("peak memory usage is not available on this platform") from exc
    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        max_rss //= 1024
    return max_rss


class MemoryTracker:
    """Measures the peak memory of the process in KiB.

    ``init`` records the current peak and then allocates a ballast buffer of
    ``ballast_kib`` KiB, so that the peak surely grows beyond what a parent
    process had already reached. The ballast is subtracted from the result.
    """

    def __init__(self, ballast_kib: int = DEFAULT_BALLAST_KIB) -> None:
        if ballast_kib < 0:
            raise ValueError("ballast size must not be negative")
        self.ballast_kib = ballast_kib
        self._init_value = 0
        self._ballast = bytearray()

    def init(self) -> None:
        """Record the starting peak and allocate the ballast."""
        self._init_value = _max_rss_kib()
        self._ballast = bytearray(b"\x01") * (self.ballast_kib * 1024)

    def max_memory_usage(self) -> int:
        """Return the peak memory usage in KiB, without the ballast."""
        if self._init_value == 0:
            raise RuntimeError(
                "Unable to compute allocated memory. MemoryTracker.init() had not been called before."
            )
        max_mem = _max_rss_kib()
        if max_mem == self._init_value:
            print("Unable to compute allocated memory.", file=sys.stderr)
            return 0
        return max(max_mem - self.ballast_kib, 0)