"""Steam linking use cases."""

import json
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel

from faf.domain.service import SteamService, UserService


class BuildSteamLinkUrlRequest(BaseModel):
    """Build Steam link URL request."""

    user_id: str  # From authenticated user
    callback_url: str  # Where to send the user once the link is done


class BuildSteamLinkUrlResponse(BaseModel):
    """Build Steam link URL response."""

    steam_url: str


class BuildSteamLinkUrlUseCase:
    """Use case for starting a Steam link."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize build Steam link URL use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: BuildSteamLinkUrlRequest
    ) -> BuildSteamLinkUrlResponse:
        """Execute build Steam link URL flow.

        Raises:
            ApiError: STEAM_ID_UNCHANGEABLE
        """
        user = await self.user_service.get_user(request.user_id)
        steam_url = await self.user_service.build_steam_link_url(
            user, request.callback_url
        )
        return BuildSteamLinkUrlResponse(steam_url=steam_url)


class LinkToSteamRequest(BaseModel):
    """Link to Steam request, built from Steam's login redirect."""

    token: str  # Link token carried through the Steam login
    redirect_params: dict[str, str]  # Every query parameter of the redirect


class LinkToSteamResponse(BaseModel):
    """Link to Steam response."""

    redirect_url: str  # Callback URL, with errors attached on failure


def append_errors(callback_url: str, errors: list[dict]) -> str:
    """Attach serialized errors to a callback URL as the errors parameter."""
    parts = urlsplit(callback_url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.append(("errors", json.dumps(errors)))
    return urlunsplit(parts._replace(query=urlencode(query)))


class LinkToSteamUseCase:
    """Use case for completing a Steam link.

    Steps:
    1. Verify Steam's OpenID redirect and extract the Steam id
    2. Link the account if all checks pass
    3. Send the user back to the callback URL, errors attached
    """

    def __init__(self, user_service: UserService, steam_service: SteamService) -> None:
        self.user_service = user_service
        self.steam_service = steam_service

    async def execute(self, request: LinkToSteamRequest) -> LinkToSteamResponse:
        """Execute link to Steam flow.

        Raises:
            ApiError: TOKEN_INVALID
            SteamApiError: If Steam did not confirm the login
        """
        steam_id = await self.steam_service.parse_steam_id_from_login_redirect(
            request.redirect_params
        )
        result = await self.user_service.link_to_steam(request.token, steam_id)

        if not result.errors:
            return LinkToSteamResponse(redirect_url=result.callback_url)

        return LinkToSteamResponse(
            redirect_url=append_errors(
                result.callback_url, [error.to_dict() for error in result.errors]
            )
        )
