"""
Campaigns (v1).

Create, schedule, send and inspect email campaigns.
"""

from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Optional

from ..core.request import HTTPMethod
from .base import API_ASC, API_DESC, PrivateResource, require

CAMPAIGN = "campaign"
CAMPAIGNS = "campaigns"
SEND = "send"
SCHEDULE = "schedule"
CANCEL = "cancel"
CLONE = "clone"
RECIPIENTS = "recipients"

MAX_CAMPAIGNS_PAGE = 100
MAX_RECIPIENTS_PAGE = 25000

CAMPAIGN_ID_MISSING = "Campaign ID was not provided."


@dataclass(frozen=True)
class CampaignOptions:
    """Optional fields of a new campaign. Unset fields are not sent."""
    from_name: Optional[str] = None
    name: Optional[str] = None
    use_smart_sending: Optional[bool] = None
    add_google_analytics: Optional[bool] = None


@dataclass(frozen=True)
class CampaignUpdate:
    """Fields to change on an existing campaign. Unset fields are left as they are."""
    list_id: Optional[str] = None
    template_id: Optional[str] = None
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    subject: Optional[str] = None
    name: Optional[str] = None
    use_smart_sending: Optional[bool] = None
    add_google_analytics: Optional[bool] = None


def normalize_sort(sort: Optional[str]) -> str:
    """
    "asc"/"desc" in any case; anything else falls back to "asc".

    Example:
        >>> normalize_sort("DESC")
        'desc'
        >>> normalize_sort("newest")
        'asc'
    """
    value = (sort or "").lower()
    return value if value in (API_ASC, API_DESC) else API_ASC


class Campaigns(PrivateResource):
    """
    Example:
        >>> campaign = await client.campaigns.create_campaign(
        ...     "LIST_ID", "TEMPLATE_ID", "news@example.com", "October news",
        ...     CampaignOptions(name="October", use_smart_sending=True),
        ... )
        >>> await client.campaigns.schedule_campaign(campaign["id"], "2021-10-01 09:00:00")
    """

    def get_campaigns(self, page: int = 0, count: int = 50) -> Awaitable[Any]:
        """List campaigns. ``count`` is capped at 100."""
        params = {"page": page, "count": min(count, MAX_CAMPAIGNS_PAGE)}
        return self._api.v1_call(CAMPAIGNS, HTTPMethod.GET, params)

    def create_campaign(
        self,
        list_id: str,
        template_id: str,
        from_email: str,
        subject: str,
        options: Optional[CampaignOptions] = None,
    ) -> Awaitable[Any]:
        require(list_id, "List ID was not provided.")
        require(template_id, "Template ID was not provided.")
        require(from_email, "From Email was not provided.")
        require(subject, "Subject was not provided.")

        params = asdict(options or CampaignOptions())
        params.update({
            "list_id": list_id,
            "template_id": template_id,
            "from_email": from_email,
            "subject": subject,
        })
        return self._api.v1_call(CAMPAIGNS, HTTPMethod.POST, params)

    def get_campaign_by_id(self, campaign_id: str) -> Awaitable[Any]:
        require(campaign_id, CAMPAIGN_ID_MISSING)
        return self._api.v1_call(f"{CAMPAIGN}/{campaign_id}", HTTPMethod.GET)

    def update_campaign(self, campaign_id: str, update: CampaignUpdate) -> Awaitable[Any]:
        require(campaign_id, CAMPAIGN_ID_MISSING)
        return self._api.v1_call(f"{CAMPAIGN}/{campaign_id}", HTTPMethod.PUT, asdict(update))

    def send_campaign_now(self, campaign_id: str) -> Awaitable[Any]:
        require(campaign_id, CAMPAIGN_ID_MISSING)
        return self._api.v1_call(f"{CAMPAIGN}/{campaign_id}/{SEND}", HTTPMethod.POST)

    def schedule_campaign(self, campaign_id: str, send_time: str) -> Awaitable[Any]:
        """
        Schedule a send.

        Args:
            campaign_id: Campaign to schedule
            send_time: UTC time as ``%Y-%m-%d %H:%M:%S``
        """
        require(campaign_id, CAMPAIGN_ID_MISSING)
        require(send_time, "Send Time was not provided.")
        return self._api.v1_call(
            f"{CAMPAIGN}/{campaign_id}/{SCHEDULE}",
            HTTPMethod.POST,
            {"send_time": send_time},
        )

    def cancel_campaign(self, campaign_id: str) -> Awaitable[Any]:
        require(campaign_id, CAMPAIGN_ID_MISSING)
        return self._api.v1_call(f"{CAMPAIGN}/{campaign_id}/{CANCEL}", HTTPMethod.POST)

    def clone_campaign(self, campaign_id: str, name: str, list_id: str) -> Awaitable[Any]:
        """Copy a campaign under a new name and recipient list."""
        require(campaign_id, "Original Campaign ID was not provided.")
        require(name, "Campaign Name was not provided.")
        require(list_id, "List ID was not provided.")
        return self._api.v1_call(
            f"{CAMPAIGN}/{campaign_id}/{CLONE}",
            HTTPMethod.POST,
            {"name": name, "list_id": list_id},
        )

    def get_campaign_recipients(
        self,
        campaign_id: str,
        count: int = 5000,
        sort: str = API_ASC,
        offset: str = "",
    ) -> Awaitable[Any]:
        """
        Recipients summary of a sent campaign.

        Args:
            campaign_id: Campaign id
            count: Page size, capped at 25000
            sort: "asc" or "desc" (case-insensitive, other values mean "asc")
            offset: ``next_offset`` from the previous page
        """
        require(campaign_id, CAMPAIGN_ID_MISSING)
        params = {
            "count": min(count, MAX_RECIPIENTS_PAGE),
            "sort": normalize_sort(sort),
            "offset": offset,
        }
        return self._api.v1_call(f"{CAMPAIGN}/{campaign_id}/{RECIPIENTS}", HTTPMethod.GET, params)
