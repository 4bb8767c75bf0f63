"""
Lists and segments (v2 JSON endpoints).

``*_subscribers`` endpoints honour the list's opt-in settings,
``*_members`` endpoints add or remove profiles regardless of them.
"""

from typing import Any, Awaitable, Mapping, Optional, Sequence

from ..core.request import HTTPMethod
from .base import PrivateResource, as_list, require

LIST = "list"
LISTS = "lists"
GROUP = "group"
SUBSCRIBE = "subscribe"
MEMBERS = "members"
EXCLUSIONS = "exclusions"
ALL = "all"

LIST_ID_MISSING = "List ID was not provided."


class Lists(PrivateResource):
    """
    Example:
        >>> created = await client.lists.create_list("VIP")
        >>> await client.lists.add_members_to_list(
        ...     created["list_id"], [{"email": "jane@example.com"}]
        ... )
    """

    def get_lists(self) -> Awaitable[Any]:
        return self._api.v2_call(LISTS, HTTPMethod.GET)

    def create_list(self, list_name: str) -> Awaitable[Any]:
        require(list_name, "List name was not provided.")
        return self._api.v2_call(LISTS, HTTPMethod.POST, {"list_name": list_name})

    def get_list_by_id(self, list_id: str) -> Awaitable[Any]:
        require(list_id, LIST_ID_MISSING)
        return self._api.v2_call(f"{LIST}/{list_id}", HTTPMethod.GET)

    def update_list_name_by_id(self, list_id: str, list_name: str) -> Awaitable[Any]:
        require(list_id, "List name or ID was not provided.")
        require(list_name, "List name or ID was not provided.")
        return self._api.v2_call(f"{LIST}/{list_id}", HTTPMethod.PUT, {"list_name": list_name})

    def delete_list(self, list_id: str) -> Awaitable[Any]:
        require(list_id, LIST_ID_MISSING)
        return self._api.v2_call(f"{LIST}/{list_id}", HTTPMethod.DELETE)

    # ==================== Subscriptions ====================

    def add_subscribers_to_list(
        self,
        list_id: str,
        profiles: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> Awaitable[Any]:
        """
        Subscribe profiles, respecting the list's opt-in settings.

        Each profile needs an ``email``, ``phone_number`` or ``push_token`` key.
        """
        require(list_id, LIST_ID_MISSING)
        params = {"profiles": [dict(profile) for profile in as_list(profiles)]}
        return self._api.v2_call(f"{LIST}/{list_id}/{SUBSCRIBE}", HTTPMethod.POST, params)

    def get_subscribers_from_list(
        self,
        list_id: str,
        emails: Optional[Sequence[str]] = None,
        phone_numbers: Optional[Sequence[str]] = None,
        push_tokens: Optional[Sequence[str]] = None,
    ) -> Awaitable[Any]:
        """Which of the given profiles are subscribed and not suppressed."""
        require(list_id, LIST_ID_MISSING)
        params = {
            "emails": as_list(emails),
            "phone_numbers": as_list(phone_numbers),
            "push_tokens": as_list(push_tokens),
        }
        return self._api.v2_call(f"{LIST}/{list_id}/{SUBSCRIBE}", HTTPMethod.GET, params)

    def delete_subscribers_from_list(
        self,
        list_id: str,
        emails: Optional[Sequence[str]] = None,
    ) -> Awaitable[Any]:
        require(list_id, LIST_ID_MISSING)
        params = {"emails": as_list(emails)}
        return self._api.v2_call(f"{LIST}/{list_id}/{SUBSCRIBE}", HTTPMethod.DELETE, params)

    # ==================== Membership ====================

    def add_members_to_list(
        self,
        list_id: str,
        profiles: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> Awaitable[Any]:
        """Add profiles regardless of opt-in settings."""
        require(list_id, LIST_ID_MISSING)
        params = {"profiles": [dict(profile) for profile in as_list(profiles)]}
        return self._api.v2_call(f"{LIST}/{list_id}/{MEMBERS}", HTTPMethod.POST, params)

    def get_members_from_list(
        self,
        list_id: str,
        emails: Optional[Sequence[str]] = None,
        phone_numbers: Optional[Sequence[str]] = None,
        push_tokens: Optional[Sequence[str]] = None,
    ) -> Awaitable[Any]:
        require(list_id, LIST_ID_MISSING)
        params = {
            "emails": as_list(emails),
            "phone_numbers": as_list(phone_numbers),
            "push_tokens": as_list(push_tokens),
        }
        return self._api.v2_call(f"{LIST}/{list_id}/{MEMBERS}", HTTPMethod.GET, params)

    def remove_members_from_list(
        self,
        list_id: str,
        emails: Optional[Sequence[str]] = None,
        phone_numbers: Optional[Sequence[str]] = None,
        push_tokens: Optional[Sequence[str]] = None,
    ) -> Awaitable[Any]:
        require(list_id, LIST_ID_MISSING)
        params = {
            "emails": as_list(emails),
            "phone_numbers": as_list(phone_numbers),
            "push_tokens": as_list(push_tokens),
        }
        return self._api.v2_call(f"{LIST}/{list_id}/{MEMBERS}", HTTPMethod.DELETE, params)

    # ==================== Paginated exports ====================

    def get_list_exclusions(self, list_id: str, marker: Optional[int] = None) -> Awaitable[Any]:
        """
        Emails excluded from a list, with reason and time.

        Pass the ``marker`` from the previous response to get the next page.
        """
        require(list_id, LIST_ID_MISSING)
        return self._api.v2_call(
            f"{LIST}/{list_id}/{EXCLUSIONS}/{ALL}",
            HTTPMethod.GET,
            {"marker": marker},
        )

    def get_all_members(self, group_id: str, marker: Optional[int] = None) -> Awaitable[Any]:
        """All emails in a list or segment, paginated with ``marker``."""
        require(group_id, "Group ID was not provided.")
        return self._api.v2_call(
            f"{GROUP}/{group_id}/{MEMBERS}/{ALL}",
            HTTPMethod.GET,
            {"marker": marker},
        )
