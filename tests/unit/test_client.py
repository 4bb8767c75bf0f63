"""
Tests for the top-level Klaviyo client.
"""

import pytest

from klaviyo_client import Klaviyo, KlaviyoClientConfig
from klaviyo_client.core.exceptions import ConfigurationError
from klaviyo_client.resources import (
    Campaigns,
    DataPrivacy,
    Lists,
    Metrics,
    Profiles,
    PublicTracking,
)

PRIVATE_GROUPS = ["profiles", "lists", "metrics", "campaigns", "data_privacy"]


class TestKlaviyoInit:

    def test_requires_a_token(self):
        with pytest.raises(ConfigurationError):
            Klaviyo()

    def test_empty_tokens_rejected(self):
        with pytest.raises(ConfigurationError):
            Klaviyo(public_token="", private_token="")

    def test_default_config(self):
        client = Klaviyo(public_token="pub")
        assert client.config == KlaviyoClientConfig()

    def test_custom_config(self):
        config = KlaviyoClientConfig.create(timeout=5)
        assert Klaviyo(private_token="pk", config=config).config is config


class TestResourceGroups:

    def test_public_only(self):
        client = Klaviyo(public_token="pub")
        assert isinstance(client.public, PublicTracking)

    @pytest.mark.parametrize("group", PRIVATE_GROUPS)
    def test_private_groups_locked_without_private_token(self, group):
        client = Klaviyo(public_token="pub")
        with pytest.raises(ConfigurationError, match="Private token"):
            getattr(client, group)

    def test_public_locked_without_public_token(self):
        client = Klaviyo(private_token="pk")
        with pytest.raises(ConfigurationError, match="Public token"):
            client.public

    def test_private_groups(self):
        client = Klaviyo(private_token="pk")
        assert isinstance(client.profiles, Profiles)
        assert isinstance(client.lists, Lists)
        assert isinstance(client.metrics, Metrics)
        assert isinstance(client.campaigns, Campaigns)
        assert isinstance(client.data_privacy, DataPrivacy)

    def test_private_groups_share_api(self):
        client = Klaviyo(private_token="pk")
        assert client.profiles.api is client.lists.api is client.data_privacy.api

    def test_public_and_private_share_transport(self):
        client = Klaviyo(public_token="pub", private_token="pk")
        assert client.public.api.transport is client.metrics.api.transport

    def test_groups_stable(self):
        client = Klaviyo(private_token="pk")
        assert client.lists is client.lists

    @pytest.mark.parametrize("attr", ["public", "profiles", "public_token", "private_token"])
    def test_read_only(self, attr):
        client = Klaviyo(public_token="pub", private_token="pk")
        with pytest.raises(AttributeError):
            setattr(client, attr, None)


class TestKlaviyoRepr:

    def test_tokens_masked(self):
        client = Klaviyo(public_token="PublicKey123456", private_token="pk_abcdef1234567890")
        text = repr(client)
        assert "PublicKey123456" not in text
        assert "pk_abcdef1234567890" not in text
        assert "pk_a***7890" in text

    def test_missing_token_shown_as_none(self):
        assert "public_token=None" in repr(Klaviyo(private_token="pk_abcdef1234567890"))


class TestKlaviyoFromEnv:

    def test_reads_tokens_and_config(self, clean_env, tmp_path):
        clean_env.setenv("KLAVIYO_PUBLIC_TOKEN", "pub")
        clean_env.setenv("KLAVIYO_PRIVATE_TOKEN", "pk_env")
        clean_env.setenv("KLAVIYO_TIMEOUT_TOTAL", "12")

        client = Klaviyo.from_env(env_file=str(tmp_path / "missing.env"))

        assert client.public_token == "pub"
        assert client.private_token == "pk_env"
        assert client.config.timeout.total == 12

    def test_no_tokens(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            Klaviyo.from_env(env_file=str(tmp_path / "missing.env"))


class TestKlaviyoLifecycle:

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self):
        client = Klaviyo(private_token="pk")
        async with client as entered:
            assert entered is client
            assert client._transport._client is not None
        assert client._transport._client is None

    @pytest.mark.asyncio
    async def test_close_without_requests(self):
        await Klaviyo(public_token="pub").close()
