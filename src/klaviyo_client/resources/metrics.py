"""Metrics (v1): listing, timelines and aggregated exports."""

from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Optional, Sequence, Union

from ..core.request import HTTPMethod
from .base import API_DESC, PrivateResource, require

METRIC = "metric"
METRICS = "metrics"
TIMELINE = "timeline"
EXPORT = "export"


@dataclass(frozen=True)
class ExportQuery:
    """
    Parameters of a metric export.

    Args:
        start_date: Beginning of the range, ``YYYY-MM-DD``
        end_date: End of the range, ``YYYY-MM-DD``
        unit: "day", "week" or "month"
        measurement: "unique", "count", "value" or "sum"
            (or a JSON-encoded list like ``'["sum","ItemCount"]'``)
        where: Event filter, e.g. ``[["ItemCount", "=", 5]]``
        by: Property to segment by
        count: Number of segments to return

    Unset fields are not sent.
    """
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    unit: Optional[str] = None
    measurement: Optional[str] = None
    where: Optional[Union[str, Sequence[Any]]] = None
    by: Optional[str] = None
    count: Optional[int] = None


class Metrics(PrivateResource):
    """Metric definitions and their events."""

    def get_metrics(self, page: int = 0, count: int = 50) -> Awaitable[Any]:
        return self._api.v1_call(METRICS, HTTPMethod.GET, {"page": page, "count": count})

    def get_metrics_timeline(
        self,
        since: Optional[Union[int, str]] = None,
        count: int = 100,
        sort: str = API_DESC,
    ) -> Awaitable[Any]:
        """
        Events of every metric.

        ``since`` is a Unix timestamp or the ``next`` value of a previous page.
        """
        params = {"since": since, "count": count, "sort": sort}
        return self._api.v1_call(f"{METRICS}/{TIMELINE}", HTTPMethod.GET, params)

    def get_metric_timeline_by_id(
        self,
        metric_id: str,
        since: Optional[Union[int, str]] = None,
        count: int = 100,
        sort: str = API_DESC,
    ) -> Awaitable[Any]:
        require(metric_id, "Metric ID was not provided.")
        params = {"since": since, "count": count, "sort": sort}
        return self._api.v1_call(f"{METRIC}/{metric_id}/{TIMELINE}", HTTPMethod.GET, params)

    def get_metric_export(
        self,
        metric_id: str,
        query: Optional[ExportQuery] = None,
    ) -> Awaitable[Any]:
        """
        Export aggregated values (counts, uniques, totals) of a metric.

        Example:
            >>> await client.metrics.get_metric_export(
            ...     "AbCdEf",
            ...     ExportQuery(start_date="2021-01-01", end_date="2021-01-31", unit="week"),
            ... )
        """
        require(metric_id, "Metric ID was not provided.")
        params = asdict(query or ExportQuery())
        return self._api.v1_call(f"{METRIC}/{metric_id}/{EXPORT}", HTTPMethod.GET, params)
