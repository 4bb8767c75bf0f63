"""
Public tracking API: identify and track.

Authenticated with the public token; every call is a GET with the event
data base64-encoded into the query string. The API answers 1 when the
payload was accepted and 0 otherwise.
"""

from typing import Any, Awaitable, Dict, Mapping, Optional, Union

from .base import PublicResource, require
from ..core.exceptions import ConfigurationError

IDENTIFY = "identify"
TRACK = "track"
TRACK_ONCE_KEY = "__track_once__"


def _with_identity(
    properties: Optional[Mapping[str, Any]],
    email: Optional[str],
    external_id: Optional[str],
) -> Dict[str, Any]:
    if not email and not external_id:
        raise ConfigurationError("Either email or id must be provided.")

    result = dict(properties or {})
    if email:
        result["email"] = email
    if external_id:
        result["id"] = external_id
    return result


class PublicTracking(PublicResource):
    """
    Identify profiles and track events.

    Example:
        >>> await client.public.track(
        ...     "Placed Order",
        ...     email="jane@example.com",
        ...     properties={"value": 42.5},
        ... )
        1
    """

    def identify(
        self,
        email: Optional[str] = None,
        id: Optional[str] = None,
        properties: Optional[Mapping[str, Any]] = None,
        is_test: bool = False,
    ) -> Awaitable[int]:
        """
        Create or update a profile.

        ``email`` and ``id`` are copied into ``properties``; at least one
        of them is required.
        """
        data = {"properties": _with_identity(properties, email, id)}
        return self._api.public_call(IDENTIFY, data, is_test)

    def track(
        self,
        event: str,
        email: Optional[str] = None,
        id: Optional[str] = None,
        properties: Optional[Mapping[str, Any]] = None,
        customer_properties: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[Union[int, float]] = None,
        ip_address: Optional[str] = None,
        is_test: bool = False,
    ) -> Awaitable[int]:
        """
        Record an event for a profile.

        Args:
            event: Metric name, e.g. "Placed Order"
            email: Profile email (copied into customer_properties)
            id: External profile id (copied into customer_properties)
            properties: Event properties
            customer_properties: Profile properties to update alongside the event
            timestamp: Unix time the event happened; omitted means "now"
            ip_address: Customer IP address
            is_test: Send as a test event

        Raises:
            ConfigurationError: No event name, or neither email nor id
        """
        require(event, "Event name was not provided.")

        data = {
            "event": event,
            "properties": dict(properties or {}),
            "customer_properties": _with_identity(customer_properties, email, id),
            "time": timestamp,
            "ipAddress": ip_address,
        }
        return self._api.public_call(TRACK, data, is_test)

    def track_once(
        self,
        event: str,
        email: Optional[str] = None,
        id: Optional[str] = None,
        properties: Optional[Mapping[str, Any]] = None,
        customer_properties: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[Union[int, float]] = None,
        ip_address: Optional[str] = None,
        is_test: bool = False,
    ) -> Awaitable[int]:
        """Like :meth:`track`, but Klaviyo records the event only once per profile."""
        once_properties = dict(properties or {})
        once_properties[TRACK_ONCE_KEY] = True
        return self.track(
            event,
            email=email,
            id=id,
            properties=once_properties,
            customer_properties=customer_properties,
            timestamp=timestamp,
            ip_address=ip_address,
            is_test=is_test,
        )
