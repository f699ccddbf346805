"""Steam client implementation.

Uses Steam's OpenID 2.0 provider to identify a Steam account and the Steam
Web API to check which games it owns.
"""

import re
from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit

import httpx
import logfire

from faf.adapter.error import SteamApiError
from faf.domain.service.steam_service import SteamClient

OPENID_NS = "http://specs.openid.net/auth/2.0"
OPENID_IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"
CLAIMED_ID_PATTERN = re.compile(r"^https?://steamcommunity\.com/openid/id/(\d+)$")


def steam_id_from_claimed_id(claimed_id: str | None) -> str:
    """Extract the 64-bit Steam id from an OpenID claimed id.

    Raises:
        SteamApiError: If the claimed id is not a Steam community id
    """
    match = CLAIMED_ID_PATTERN.match(claimed_id or "")
    if not match:
        raise SteamApiError(f"Not a Steam OpenID identity: {claimed_id!r}")
    return match.group(1)


def verify_return_to(params: Mapping[str, str]) -> None:
    """Check that the redirect carries the query of the signed return_to URL.

    Steam signs openid.return_to, not the rest of the redirect, so each
    parameter we put into return_to must arrive unchanged.

    Raises:
        SteamApiError: If return_to is missing or a parameter differs
    """
    return_to = params.get("openid.return_to")
    if not return_to:
        raise SteamApiError("OpenID assertion without return_to")

    for key, value in parse_qsl(urlsplit(return_to).query, keep_blank_values=True):
        if params.get(key) != value:
            logfire.warn("Steam redirect does not match return_to", parameter=key)
            raise SteamApiError(f"Redirect parameter {key!r} does not match return_to")


class RealSteamClient(SteamClient):
    """Steam client talking to steamcommunity.com and api.steampowered.com."""

    def __init__(
        self,
        api_key: str,
        realm: str,
        login_url: str = "https://steamcommunity.com/openid/login",
        api_url: str = "https://api.steampowered.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Steam client.

        Args:
            api_key: Steam Web API key
            realm: OpenID realm, the origin the redirect URLs live under
            login_url: Steam OpenID endpoint
            api_url: Steam Web API base URL
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key
        self.realm = realm
        self.login_url = login_url
        self.api_url = api_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=30.0)

    def build_login_url(self, redirect_url: str) -> str:
        """Build the OpenID checkid_setup URL.

        Args:
            redirect_url: Where Steam sends the user after login

        Returns:
            Steam login URL
        """
        params = {
            "openid.ns": OPENID_NS,
            "openid.mode": "checkid_setup",
            "openid.return_to": redirect_url,
            "openid.realm": self.realm,
            "openid.identity": OPENID_IDENTIFIER_SELECT,
            "openid.claimed_id": OPENID_IDENTIFIER_SELECT,
        }
        return f"{self.login_url}?{urlencode(params)}"

    async def owns_game(self, steam_id: str, app_id: int) -> bool:
        """Check game ownership via IPlayerService/GetOwnedGames.

        Private profiles report no games and therefore count as not owning.

        Raises:
            SteamApiError: If the request fails
        """
        params = {
            "key": self.api_key,
            "steamid": steam_id,
            "format": "json",
            "appids_filter[0]": str(app_id),
        }

        try:
            async with self._client() as client:
                response = await client.get(
                    f"{self.api_url}/IPlayerService/GetOwnedGames/v0001/",
                    params=params,
                )
        except httpx.HTTPError as e:
            logfire.error("Steam owned games HTTP error", error=str(e))
            raise SteamApiError(f"HTTP error querying owned games: {e}")

        if response.status_code != 200:
            logfire.error(
                "Steam owned games request failed",
                status_code=response.status_code,
                steam_id=steam_id,
            )
            raise SteamApiError(f"Owned games request failed: {response.status_code}")

        try:
            games = response.json().get("response", {}).get("games", [])
            return any(game.get("appid") == app_id for game in games)
        except (ValueError, AttributeError) as e:
            logfire.error("Steam owned games response malformed", steam_id=steam_id)
            raise SteamApiError(f"Malformed owned games response: {e}")

    async def parse_steam_id_from_login_redirect(
        self, params: Mapping[str, str]
    ) -> str:
        """Verify an OpenID positive assertion with Steam.

        The redirect must match the signed return_to URL. The assertion is
        then sent back to Steam in check_authentication mode; only a
        response with is_valid:true is trusted.

        Raises:
            SteamApiError: If the redirect is not a valid login
        """
        if params.get("openid.mode") != "id_res":
            raise SteamApiError(f"Unexpected OpenID mode: {params.get('openid.mode')!r}")

        verify_return_to(params)
        steam_id = steam_id_from_claimed_id(params.get("openid.claimed_id"))

        verification = {
            key: value for key, value in params.items() if key.startswith("openid.")
        }
        verification["openid.mode"] = "check_authentication"

        try:
            async with self._client() as client:
                response = await client.post(self.login_url, data=verification)
        except httpx.HTTPError as e:
            logfire.error("Steam OpenID verification HTTP error", error=str(e))
            raise SteamApiError(f"HTTP error verifying login: {e}")

        if response.status_code != 200:
            raise SteamApiError(f"OpenID verification failed: {response.status_code}")

        fields = dict(
            line.split(":", 1) for line in response.text.splitlines() if ":" in line
        )
        if fields.get("is_valid", "").strip() != "true":
            logfire.warn("Steam OpenID assertion rejected", steam_id=steam_id)
            raise SteamApiError("Steam did not confirm the login")

        return steam_id


class MockSteamClient(SteamClient):
    """Mock Steam client for testing.

    Reports ownership for the Steam ids in owned_steam_ids and accepts any
    redirect carrying a Steam claimed id that matches its return_to, without
    contacting Steam.
    """

    def __init__(self, owned_steam_ids: set[str] | None = None) -> None:
        self.owned_steam_ids = owned_steam_ids if owned_steam_ids is not None else set()

    def build_login_url(self, redirect_url: str) -> str:
        return f"https://steamcommunity.com/openid/login?{urlencode({'openid.return_to': redirect_url})}"

    async def owns_game(self, steam_id: str, app_id: int) -> bool:
        return steam_id in self.owned_steam_ids

    async def parse_steam_id_from_login_redirect(
        self, params: Mapping[str, str]
    ) -> str:
        verify_return_to(params)
        return steam_id_from_claimed_id(params.get("openid.claimed_id"))
