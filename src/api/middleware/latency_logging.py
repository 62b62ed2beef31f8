"""Request latency logging middleware for performance monitoring."""

import logging
import re
import time
from collections import defaultdict
from typing import Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

# Thresholds for log levels (in milliseconds)
SLOW_REQUEST_THRESHOLD_MS = 1000  # Log as warning above 1s
VERY_SLOW_REQUEST_THRESHOLD_MS = 3000  # Log as error above 3s

HEALTH_CHECK_PATHS = ("/health", "/health/ready", "/health/stats")

_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|$)")


class LatencyStats:
    """Simple in-memory stats tracker for request latencies.

    Backs the /health/stats endpoint. Only the most recent
    ``max_samples`` requests are kept.
    """

    def __init__(self, max_samples: int = 1000):
        self._samples: list[tuple[str, float]] = []  # (path, latency_ms)
        self._max_samples = max_samples

    def record(self, path: str, latency_ms: float) -> None:
        """Record a latency sample."""
        self._samples.append((path, latency_ms))
        if len(self._samples) > self._max_samples:
            self._samples = self._samples[-self._max_samples:]

    def reset(self) -> None:
        self._samples = []

    def get_stats(self) -> dict:
        """Get aggregated stats."""
        if not self._samples:
            return {
                "total_requests": 0,
                "avg_latency_ms": 0,
                "p50_latency_ms": 0,
                "p95_latency_ms": 0,
                "p99_latency_ms": 0,
            }

        latencies = sorted(s[1] for s in self._samples)
        total = len(latencies)

        return {
            "total_requests": total,
            "avg_latency_ms": round(sum(latencies) / total, 2),
            "p50_latency_ms": round(latencies[int(total * 0.5)], 2),
            "p95_latency_ms": round(latencies[min(int(total * 0.95), total - 1)], 2),
            "p99_latency_ms": round(latencies[min(int(total * 0.99), total - 1)], 2),
        }

    def get_stats_by_path(self) -> dict:
        """Get stats grouped by path, with numeric ids collapsed to ``{id}``."""
        by_path: dict[str, list[float]] = defaultdict(list)
        for path, latency in self._samples:
            by_path[self.normalize_path(path)].append(latency)

        result = {}
        for path, latencies in by_path.items():
            sorted_latencies = sorted(latencies)
            total = len(sorted_latencies)
            result[path] = {
                "count": total,
                "avg_ms": round(sum(sorted_latencies) / total, 2),
                "p95_ms": round(sorted_latencies[min(int(total * 0.95), total - 1)], 2),
            }

        return result

    @staticmethod
    def normalize_path(path: str) -> str:
        """Replace numeric path segments such as profile ids with ``{id}``."""
        return _NUMERIC_SEGMENT.sub("/{id}", path)


# Global stats instance
_latency_stats: LatencyStats | None = None


def get_latency_stats() -> LatencyStats:
    """Get or create the global latency stats instance."""
    global _latency_stats
    if _latency_stats is None:
        _latency_stats = LatencyStats()
    return _latency_stats


async def latency_logging_with_stats_middleware(
    request: Request, call_next: Callable
) -> Response:
    """Log request latency and record it for the stats endpoint.

    Log level escalates with latency and status code. Health checks are
    neither recorded nor logged unless they are slow.
    """
    start_time = time.perf_counter()

    method = request.method
    path = request.url.path
    is_health_check = path in HEALTH_CHECK_PATHS

    response = None
    error_occurred = False

    try:
        response = await call_next(request)
        return response
    except Exception:
        error_occurred = True
        raise
    finally:
        latency_ms = (time.perf_counter() - start_time) * 1000

        if not is_health_check:
            get_latency_stats().record(path, latency_ms)

        status_code = response.status_code if response else 500

        log_msg = f"{method} {path} - {status_code} - {latency_ms:.2f}ms"

        if is_health_check:
            if latency_ms > 100:
                logger.debug(log_msg)
        elif error_occurred or status_code >= 500:
            logger.error(log_msg)
        elif latency_ms > VERY_SLOW_REQUEST_THRESHOLD_MS:
            logger.error(f"VERY SLOW REQUEST: {log_msg}")
        elif latency_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(f"SLOW REQUEST: {log_msg}")
        elif status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)
