"""Steam infrastructure providers."""

from dishka import Scope, provide

from faf.adapter.steam import RealSteamClient
from faf.config import Settings
from faf.domain.service import SteamClient
from faf.util.di.base import ProviderBase


class SteamProvider(ProviderBase):
    """Steam component base."""

    __mock_component__ = "steam"


class ProdSteamProvider(SteamProvider):
    """Production Steam provider talking to Steam's OpenID and Web API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_steam_client(self, settings: Settings) -> SteamClient:
        """Provide Steam client."""
        return RealSteamClient(
            api_key=settings.steam.api_key,
            realm=settings.steam.realm,
            login_url=settings.steam.login_url,
            api_url=settings.steam.api_url,
        )
