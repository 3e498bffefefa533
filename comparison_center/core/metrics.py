"""
Request duration metrics fed by timing_asgi.

TimingMiddleware reports a wall and a cpu timing per request. RequestMetrics
keeps the wall timings, grouped by route and response status, and logs each
one at debug level. main.py serves the snapshot on /metrics.
"""
import math
from collections import deque
from dataclasses import dataclass, field

from timing_asgi import TimingClient  # type: ignore

from comparison_center.utils import get_logger


log = get_logger(__name__)

METRIC_NAME = "app_http_request"
QUANTILES = (0.5, 0.9, 0.99)
# Recent samples kept per route and status for the quantiles
WINDOW_SIZE = 1000

ROUTE_PREFIXES = ("main.", "comparison_center.", "features.")


def route_label(metric_name: str) -> str:
    """Shorten a StarletteScopeToName metric name, e.g. to `objects.routes.get_object`."""
    for prefix in ROUTE_PREFIXES:
        metric_name = metric_name.removeprefix(prefix)
    return metric_name


def tag_value(tags, name: str) -> str | None:
    prefix = f"{name}:"
    for tag in tags:
        if tag.startswith(prefix):
            return tag[len(prefix):]
    return None


def quantile(ordered: list[float], q: float) -> float:
    """Nearest-rank quantile of an already sorted, non-empty list."""
    rank = max(1, math.ceil(q * len(ordered)))
    return ordered[rank - 1]


@dataclass
class RequestSummary:
    count: int = 0
    total: float = 0.0
    maximum: float = 0.0
    recent: deque = field(default_factory=lambda: deque(maxlen=WINDOW_SIZE))

    def observe(self, seconds: float) -> None:
        self.count += 1
        self.total += seconds
        self.maximum = max(self.maximum, seconds)
        self.recent.append(seconds)


class RequestMetrics(TimingClient):
    """Aggregates request durations by route and status."""

    def __init__(self):
        self.summaries: dict[tuple[str, str], RequestSummary] = {}

    def timing(self, metric_name, timing, tags):
        route = route_label(metric_name)
        log.debug(dict(route=route, timing=timing, tags=tags))
        if "time:wall" not in tags:
            return
        status = tag_value(tags, "http_status") or "unknown"
        summary = self.summaries.setdefault((route, status), RequestSummary())
        summary.observe(timing)

    def snapshot(self) -> list[dict]:
        """Current summaries, sorted by route then status."""
        entries = []
        for (route, status), summary in sorted(self.summaries.items()):
            ordered = sorted(summary.recent)
            entries.append({
                "route": route,
                "status": status,
                "count": summary.count,
                "sum": summary.total,
                "max": summary.maximum,
                "quantiles": {str(q): quantile(ordered, q) for q in QUANTILES},
            })
        return entries
