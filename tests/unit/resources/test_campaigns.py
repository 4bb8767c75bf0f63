"""
Tests for the Campaigns resource group.
"""

import pytest

from klaviyo_client.core.exceptions import ConfigurationError
from klaviyo_client.core.request import HTTPMethod
from klaviyo_client.resources.campaigns import (
    CampaignOptions,
    Campaigns,
    CampaignUpdate,
    normalize_sort,
)


class TestCampaigns:

    def test_get_campaigns(self, private_api):
        Campaigns(private_api).get_campaigns(page=2, count=20)
        private_api.v1_call.assert_called_once_with("campaigns", HTTPMethod.GET, {"page": 2, "count": 20})

    def test_get_campaigns_caps_count(self, private_api):
        Campaigns(private_api).get_campaigns(count=500)
        assert private_api.v1_call.call_args.args[2]["count"] == 100

    def test_create_campaign(self, private_api):
        Campaigns(private_api).create_campaign(
            "L1", "T1", "news@example.com", "Hello",
            CampaignOptions(name="October", use_smart_sending=True),
        )

        resource, method, params = private_api.v1_call.call_args.args
        assert (resource, method) == ("campaigns", HTTPMethod.POST)
        assert params == {
            "from_name": None,
            "name": "October",
            "use_smart_sending": True,
            "add_google_analytics": None,
            "list_id": "L1",
            "template_id": "T1",
            "from_email": "news@example.com",
            "subject": "Hello",
        }

    @pytest.mark.parametrize("args, message", [
        (("", "T1", "a@b.co", "S"), "List ID"),
        (("L1", "", "a@b.co", "S"), "Template ID"),
        (("L1", "T1", "", "S"), "From Email"),
        (("L1", "T1", "a@b.co", ""), "Subject"),
    ])
    def test_create_campaign_requires_fields(self, private_api, args, message):
        with pytest.raises(ConfigurationError, match=message):
            Campaigns(private_api).create_campaign(*args)

    def test_get_campaign_by_id(self, private_api):
        Campaigns(private_api).get_campaign_by_id("C1")
        private_api.v1_call.assert_called_once_with("campaign/C1", HTTPMethod.GET)

    def test_update_campaign(self, private_api):
        Campaigns(private_api).update_campaign("C1", CampaignUpdate(subject="New subject"))
        resource, method, params = private_api.v1_call.call_args.args
        assert (resource, method) == ("campaign/C1", HTTPMethod.PUT)
        assert params["subject"] == "New subject"
        assert params["list_id"] is None

    def test_send_now(self, private_api):
        Campaigns(private_api).send_campaign_now("C1")
        private_api.v1_call.assert_called_once_with("campaign/C1/send", HTTPMethod.POST)

    def test_schedule(self, private_api):
        Campaigns(private_api).schedule_campaign("C1", "2021-10-01 09:00:00")
        private_api.v1_call.assert_called_once_with(
            "campaign/C1/schedule", HTTPMethod.POST, {"send_time": "2021-10-01 09:00:00"}
        )

    def test_schedule_requires_time(self, private_api):
        with pytest.raises(ConfigurationError, match="Send Time"):
            Campaigns(private_api).schedule_campaign("C1", "")

    def test_cancel(self, private_api):
        Campaigns(private_api).cancel_campaign("C1")
        private_api.v1_call.assert_called_once_with("campaign/C1/cancel", HTTPMethod.POST)

    def test_clone(self, private_api):
        Campaigns(private_api).clone_campaign("C1", "Copy", "L2")
        private_api.v1_call.assert_called_once_with(
            "campaign/C1/clone", HTTPMethod.POST, {"name": "Copy", "list_id": "L2"}
        )

    @pytest.mark.parametrize("args", [("", "Copy", "L2"), ("C1", "", "L2"), ("C1", "Copy", "")])
    def test_clone_requires_fields(self, private_api, args):
        with pytest.raises(ConfigurationError):
            Campaigns(private_api).clone_campaign(*args)

    def test_recipients_defaults(self, private_api):
        Campaigns(private_api).get_campaign_recipients("C1")
        private_api.v1_call.assert_called_once_with(
            "campaign/C1/recipients", HTTPMethod.GET, {"count": 5000, "sort": "asc", "offset": ""}
        )

    def test_recipients_caps_and_normalizes(self, private_api):
        Campaigns(private_api).get_campaign_recipients("C1", count=100000, sort="DESC", offset="abc")
        assert private_api.v1_call.call_args.args[2] == {"count": 25000, "sort": "desc", "offset": "abc"}

    @pytest.mark.parametrize("call", [
        lambda c: c.get_campaign_by_id(""),
        lambda c: c.update_campaign("", CampaignUpdate()),
        lambda c: c.send_campaign_now(None),
        lambda c: c.cancel_campaign(""),
        lambda c: c.get_campaign_recipients(""),
    ])
    def test_missing_campaign_id(self, private_api, call):
        with pytest.raises(ConfigurationError, match="Campaign ID"):
            call(Campaigns(private_api))
        private_api.v1_call.assert_not_called()


class TestNormalizeSort:

    @pytest.mark.parametrize("value, expected", [
        ("asc", "asc"),
        ("ASC", "asc"),
        ("Desc", "desc"),
        ("newest", "asc"),
        ("", "asc"),
        (None, "asc"),
    ])
    def test_values(self, value, expected):
        assert normalize_sort(value) == expected
