"""Profiles (v1 ``person`` endpoints)."""

from typing import Any, Awaitable, Mapping, Optional, Union

from ..core.request import HTTPMethod
from .base import API_DESC, PrivateResource, require

PERSON = "person"
METRIC = "metric"
METRICS = "metrics"
TIMELINE = "timeline"


class Profiles(PrivateResource):
    """Read and update profiles and their event timelines."""

    def get_profile(self, profile_id: str) -> Awaitable[Any]:
        require(profile_id, "Profile ID was not provided.")
        return self._api.v1_call(f"{PERSON}/{profile_id}", HTTPMethod.GET)

    def update_profile(
        self,
        profile_id: str,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[Any]:
        """
        Update profile properties.

        Properties are sent as form fields; nested values are encoded as JSON text.
        """
        require(profile_id, "Profile ID was not provided.")
        return self._api.v1_call(f"{PERSON}/{profile_id}", HTTPMethod.PUT, dict(properties or {}))

    def get_profile_metrics_timeline(
        self,
        profile_id: str,
        since: Optional[Union[int, str]] = None,
        count: int = 100,
        sort: str = API_DESC,
    ) -> Awaitable[Any]:
        """
        All events of a profile.

        Args:
            profile_id: Klaviyo profile id
            since: Unix timestamp or the ``next`` uuid from a previous page
            count: Page size
            sort: "asc" or "desc"
        """
        require(profile_id, "Profile ID was not provided.")
        params = {"since": since, "count": count, "sort": sort}
        return self._api.v1_call(f"{PERSON}/{profile_id}/{METRICS}/{TIMELINE}", HTTPMethod.GET, params)

    def get_profile_metrics_timeline_by_id(
        self,
        profile_id: str,
        metric_id: str,
        since: Optional[Union[int, str]] = None,
        count: int = 100,
        sort: str = API_DESC,
    ) -> Awaitable[Any]:
        """Events of a single metric for a profile."""
        require(profile_id, "Profile ID was not provided.")
        require(metric_id, "Metric ID was not provided.")
        params = {"since": since, "count": count, "sort": sort}
        resource = f"{PERSON}/{profile_id}/{METRIC}/{metric_id}/{TIMELINE}"
        return self._api.v1_call(resource, HTTPMethod.GET, params)
