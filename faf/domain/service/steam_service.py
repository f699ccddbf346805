"""Steam domain service."""

from collections.abc import Mapping

import logfire

from .base import Service


class SteamClient:
    """Steam platform interface, implemented by the Steam adapter."""

    def build_login_url(self, redirect_url: str) -> str:
        """Build the Steam OpenID login URL.

        Args:
            redirect_url: Where Steam sends the user after login

        Returns:
            URL to send the user to
        """
        raise NotImplementedError

    async def owns_game(self, steam_id: str, app_id: int) -> bool:
        """Check whether a Steam account owns an app.

        Raises:
            SteamApiError: If Steam could not be queried
        """
        raise NotImplementedError

    async def parse_steam_id_from_login_redirect(
        self, params: Mapping[str, str]
    ) -> str:
        """Verify an OpenID login redirect and extract the Steam id.

        Args:
            params: All query parameters of the redirect, including the
                ones of the return_to URL

        Returns:
            The 64-bit Steam id of the logged in account

        Raises:
            SteamApiError: If the redirect is not a valid, verified login
        """
        raise NotImplementedError


class SteamService(Service):
    """Domain service for Steam identity operations."""

    def __init__(self, steam_client: SteamClient, forged_alliance_app_id: int) -> None:
        """Initialize Steam service.

        Args:
            steam_client: Steam adapter
            forged_alliance_app_id: App id a linked account must own
        """
        self.steam_client = steam_client
        self.forged_alliance_app_id = forged_alliance_app_id

    def build_login_url(self, redirect_url: str) -> str:
        return self.steam_client.build_login_url(redirect_url)

    async def owns_forged_alliance(self, steam_id: str) -> bool:
        """Check whether a Steam account owns Forged Alliance."""
        with logfire.span("steam_service.owns_forged_alliance", steam_id=steam_id):
            owns = await self.steam_client.owns_game(
                steam_id, self.forged_alliance_app_id
            )
            logfire.info("Steam ownership checked", steam_id=steam_id, owns=owns)
            return owns

    async def parse_steam_id_from_login_redirect(
        self, params: Mapping[str, str]
    ) -> str:
        with logfire.span("steam_service.parse_steam_id_from_login_redirect"):
            steam_id = await self.steam_client.parse_steam_id_from_login_redirect(
                params
            )
            logfire.info("Steam login redirect verified", steam_id=steam_id)
            return steam_id
