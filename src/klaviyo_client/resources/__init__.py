"""Resource groups: thin parameter-shaping wrappers over PrivateApi / PublicApi."""

from .base import PrivateResource, PublicResource
from .public import PublicTracking
from .profiles import Profiles
from .lists import Lists
from .metrics import Metrics, ExportQuery
from .campaigns import Campaigns, CampaignOptions, CampaignUpdate
from .data_privacy import DataPrivacy

__all__ = [
    "PrivateResource",
    "PublicResource",
    "PublicTracking",
    "Profiles",
    "Lists",
    "Metrics",
    "ExportQuery",
    "Campaigns",
    "CampaignOptions",
    "CampaignUpdate",
    "DataPrivacy",
]
