"""Unit tests for the Steam client."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from faf.adapter.error import SteamApiError
from faf.adapter.steam import MockSteamClient, RealSteamClient
from faf.adapter.steam.client import steam_id_from_claimed_id

STEAM_ID = "76561198000000001"
CLAIMED_ID = f"https://steamcommunity.com/openid/id/{STEAM_ID}"


def make_client(handler) -> RealSteamClient:
    return RealSteamClient(
        api_key="test-key",
        realm="http://localhost:8010",
        transport=httpx.MockTransport(handler),
    )


RETURN_TO = "http://localhost:8010/users/linkToSteam?token=link-token"


def login_redirect_params() -> dict[str, str]:
    return {
        "token": "link-token",
        "openid.return_to": RETURN_TO,
        "openid.ns": "http://specs.openid.net/auth/2.0",
        "openid.mode": "id_res",
        "openid.claimed_id": CLAIMED_ID,
        "openid.identity": CLAIMED_ID,
        "openid.sig": "c2lnbmF0dXJl",
    }


class TestSteamIdFromClaimedId:
    """Tests for claimed id parsing."""

    def test_extracts_steam_id(self):
        assert steam_id_from_claimed_id(CLAIMED_ID) == STEAM_ID

    @pytest.mark.parametrize(
        "claimed_id",
        [None, "", "https://example.com/openid/id/1", "https://steamcommunity.com/openid/id/abc"],
    )
    def test_rejects_other_identities(self, claimed_id):
        with pytest.raises(SteamApiError):
            steam_id_from_claimed_id(claimed_id)


class TestBuildLoginUrl:
    """Tests for RealSteamClient.build_login_url()."""

    def test_builds_checkid_setup_url(self):
        """Should send the user to Steam with our redirect and realm."""
        # Arrange
        client = make_client(lambda request: httpx.Response(500))

        # Act
        url = client.build_login_url("http://localhost:8010/users/linkToSteam?token=t")

        # Assert
        parts = urlsplit(url)
        params = parse_qs(parts.query)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://steamcommunity.com/openid/login"
        )
        assert params["openid.mode"] == ["checkid_setup"]
        assert params["openid.return_to"] == [
            "http://localhost:8010/users/linkToSteam?token=t"
        ]
        assert params["openid.realm"] == ["http://localhost:8010"]


class TestOwnsGame:
    """Tests for RealSteamClient.owns_game()."""

    @pytest.mark.asyncio
    async def test_owns_game(self):
        """Should find the app in the owned games response."""
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"response": {"game_count": 1, "games": [{"appid": 9420}]}},
            )

        client = make_client(handler)

        # Act
        owns = await client.owns_game(STEAM_ID, 9420)

        # Assert
        assert owns is True
        assert seen[0].url.path == "/IPlayerService/GetOwnedGames/v0001/"
        assert seen[0].url.params["steamid"] == STEAM_ID
        assert seen[0].url.params["key"] == "test-key"

    @pytest.mark.asyncio
    async def test_private_profile_owns_nothing(self):
        """Should treat a response without games as not owning."""
        client = make_client(lambda request: httpx.Response(200, json={"response": {}}))

        assert await client.owns_game(STEAM_ID, 9420) is False

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        """Should raise SteamApiError when Steam answers 200 without JSON."""
        client = make_client(
            lambda request: httpx.Response(200, text="<html>Service Unavailable</html>")
        )

        with pytest.raises(SteamApiError):
            await client.owns_game(STEAM_ID, 9420)

    @pytest.mark.asyncio
    async def test_api_failure(self):
        """Should raise SteamApiError when Steam answers with an error."""
        client = make_client(lambda request: httpx.Response(503))

        with pytest.raises(SteamApiError):
            await client.owns_game(STEAM_ID, 9420)


class TestParseSteamIdFromLoginRedirect:
    """Tests for RealSteamClient.parse_steam_id_from_login_redirect()."""

    @pytest.mark.asyncio
    async def test_verified_assertion(self):
        """Should verify the assertion with Steam and return the Steam id."""
        # Arrange
        posted: list[dict[str, list[str]]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            posted.append(parse_qs(request.content.decode()))
            return httpx.Response(
                200, text="ns:http://specs.openid.net/auth/2.0\nis_valid:true\n"
            )

        client = make_client(handler)

        # Act
        steam_id = await client.parse_steam_id_from_login_redirect(
            login_redirect_params()
        )

        # Assert
        assert steam_id == STEAM_ID
        assert posted[0]["openid.mode"] == ["check_authentication"]
        assert posted[0]["openid.sig"] == ["c2lnbmF0dXJl"]
        assert "token" not in posted[0]

    @pytest.mark.asyncio
    async def test_rejected_assertion(self):
        """Should raise when Steam does not confirm the login."""
        client = make_client(
            lambda request: httpx.Response(200, text="is_valid:false\n")
        )

        with pytest.raises(SteamApiError):
            await client.parse_steam_id_from_login_redirect(login_redirect_params())

    @pytest.mark.asyncio
    async def test_cancelled_login(self):
        """Should raise for a redirect that is not a positive assertion."""
        client = make_client(lambda request: httpx.Response(500))

        with pytest.raises(SteamApiError):
            await client.parse_steam_id_from_login_redirect({"openid.mode": "cancel"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tampered",
        [
            {"token": "other-token"},
            {"openid.return_to": ""},
            {"openid.return_to": "http://localhost:8010/users/linkToSteam?token=other"},
        ],
    )
    async def test_redirect_must_match_return_to(self, tampered):
        """Should reject a redirect whose query differs from the signed return_to."""
        # Arrange
        posted: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            posted.append(request)
            return httpx.Response(200, text="is_valid:true\n")

        client = make_client(handler)
        params = {**login_redirect_params(), **tampered}

        # Act & Assert
        with pytest.raises(SteamApiError):
            await client.parse_steam_id_from_login_redirect(params)

        assert posted == []


class TestMockSteamClient:
    """Tests for MockSteamClient."""

    @pytest.mark.asyncio
    async def test_ownership_is_scripted(self):
        client = MockSteamClient(owned_steam_ids={STEAM_ID})

        assert await client.owns_game(STEAM_ID, 9420) is True
        assert await client.owns_game("76561198000000002", 9420) is False

    @pytest.mark.asyncio
    async def test_redirect_is_checked_against_return_to(self):
        client = MockSteamClient()
        params = {**login_redirect_params(), "token": "other-token"}

        with pytest.raises(SteamApiError):
            await client.parse_steam_id_from_login_redirect(params)

        assert await client.parse_steam_id_from_login_redirect(
            login_redirect_params()
        ) == STEAM_ID
