"""User domain service.

Owns the account lifecycle: registration and activation, login, password
and email changes, password reset and linking a Steam account.
"""

import calendar
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import logfire

from faf.config import Settings
from faf.domain.error import ApiError, Error, ErrorCode
from faf.domain.model import (
    GlobalRating,
    Ladder1v1Rating,
    NameRecord,
    User,
    UserUpdatedEvent,
)
from faf.domain.repository import (
    AnopeUserRepository,
    GlobalRatingRepository,
    Ladder1v1RatingRepository,
    NameRecordRepository,
    UserRepository,
)
from faf.domain.value import NameRecordId, TokenType, UserId

from .base import Service
from .email_service import EmailService
from .event_publisher import EventPublisher
from .password_encoder import PasswordEncoder, legacy_md5
from .steam_service import SteamService
from .token_service import TokenService

KEY_USERNAME = "username"
KEY_EMAIL = "email"
KEY_USER_ID = "id"
KEY_STEAM_LINK_CALLBACK_URL = "callbackUrl"

USERNAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]{2,15}")

STEAM_LINK_TOKEN_LIFETIME = timedelta(hours=1)

registration_counter = logfire.metric_counter(
    "user.registrations.count", description="Registration funnel steps"
)
name_change_counter = logfire.metric_counter(
    "user.name.change.count", description="Username changes"
)
password_reset_counter = logfire.metric_counter(
    "user.password.reset.count", description="Password reset steps"
)


@dataclass
class SteamLinkResult:
    """Outcome of a Steam link redirect.

    The caller is sent back to callback_url; errors is empty on success.
    """

    callback_url: str
    errors: list[Error] = field(default_factory=list)


def months_before(moment: datetime, months: int) -> datetime:
    """Same day and time the given number of calendar months earlier.

    Clamps to the last day of the target month (March 31st minus one month
    is February 28th or 29th).
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class UserService(Service):
    """Domain service for the account lifecycle."""

    def __init__(
        self,
        user_repository: UserRepository,
        name_record_repository: NameRecordRepository,
        global_rating_repository: GlobalRatingRepository,
        ladder1v1_rating_repository: Ladder1v1RatingRepository,
        anope_user_repository: AnopeUserRepository,
        token_service: TokenService,
        email_service: EmailService,
        steam_service: SteamService,
        event_publisher: EventPublisher,
        settings: Settings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            name_record_repository: Name history repository
            global_rating_repository: Global rating repository
            ladder1v1_rating_repository: Ladder 1v1 rating repository
            anope_user_repository: IRC services password mirror
            token_service: Claim token service
            email_service: Email domain service
            steam_service: Steam domain service
            event_publisher: Request scoped user change publisher
            settings: Application settings
        """
        self.user_repository = user_repository
        self.name_record_repository = name_record_repository
        self.global_rating_repository = global_rating_repository
        self.ladder1v1_rating_repository = ladder1v1_rating_repository
        self.anope_user_repository = anope_user_repository
        self.token_service = token_service
        self.email_service = email_service
        self.steam_service = steam_service
        self.event_publisher = event_publisher
        self.settings = settings
        self.password_encoder = PasswordEncoder()

    async def register(self, username: str, email: str) -> None:
        """Request a new account.

        No account is created yet: username and email travel inside the
        activation token mailed to the user.

        Raises:
            ApiError: USERNAME_INVALID, USERNAME_TAKEN, EMAIL_INVALID,
                EMAIL_REGISTERED or USERNAME_RESERVED
        """
        with logfire.span("user_service.register", username=username):
            await self._validate_username(username)
            self.email_service.validate_email_address(email)

            if await self.user_repository.exists_by_email(email):
                logfire.info("Email already registered", username=username)
                raise ApiError.of(ErrorCode.EMAIL_REGISTERED, email)

            reservation_months = self.settings.user.username_reservation_time_in_months
            reserved_by = await self._get_last_username_owner_within_months(
                username, reservation_months
            )
            if reserved_by is not None:
                logfire.info(
                    "Username reserved",
                    username=username,
                    reserved_by=str(reserved_by),
                )
                raise ApiError.of(
                    ErrorCode.USERNAME_RESERVED, username, reservation_months
                )

            token = self.token_service.create_token(
                TokenType.REGISTRATION,
                timedelta(seconds=self.settings.registration.link_expiration_seconds),
                {KEY_USERNAME: username, KEY_EMAIL: email},
            )
            activation_url = self.settings.registration.activation_url_format.format(
                username=username, token=token
            )

            await self.email_service.send_activation_mail(
                username, email, activation_url
            )

            registration_counter.add(1, {"step": "registration"})
            logfire.info("Registration requested", username=username)

    async def activate(
        self, registration_token: str, password: str, ip_address: str | None
    ) -> User:
        """Create the account described by a registration token.

        The user and both rating rows are written in the request's
        transaction.

        Raises:
            ApiError: TOKEN_INVALID, or USERNAME_TAKEN if the name was taken
                since the registration was requested
        """
        with logfire.span("user_service.activate"):
            claims = self.token_service.resolve_token(
                TokenType.REGISTRATION, registration_token
            )
            username = claims.get(KEY_USERNAME)
            email = claims.get(KEY_EMAIL)
            if not username or not email:
                raise ApiError.of(ErrorCode.TOKEN_INVALID)

            # The username could have been taken in the meantime
            await self._validate_username(username)

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                login=username,
                email=email,
                password=self.password_encoder.encode(password),
                recent_ip_address=ip_address,
                created_at=now,
                updated_at=now,
            )
            user = await self.user_repository.save(user)

            # Ratings are computed elsewhere, rows must exist for new players
            mean = self.settings.rating.default_mean
            deviation = self.settings.rating.default_deviation
            await self.global_rating_repository.save(
                GlobalRating(user_id=user.id, mean=mean, deviation=deviation)
            )
            await self.ladder1v1_rating_repository.save(
                Ladder1v1Rating(user_id=user.id, mean=mean, deviation=deviation)
            )

            self._broadcast_user_change(user)
            registration_counter.add(1, {"step": "activation"})
            logfire.info("User activated", user_id=str(user.id), login=user.login)
            return user

    async def change_password(
        self, current_password: str, new_password: str, user: User
    ) -> User:
        """Change the password of a user who knows the current one.

        Raises:
            ApiError: PASSWORD_CHANGE_FAILED_WRONG_PASSWORD
        """
        with logfire.span("user_service.change_password", user_id=str(user.id)):
            if not self.password_encoder.matches(current_password, user.password):
                logfire.info("Password change rejected", user_id=str(user.id))
                raise ApiError.of(ErrorCode.PASSWORD_CHANGE_FAILED_WRONG_PASSWORD)

            return await self._set_password(user, new_password)

    async def change_login(
        self, new_login: str, user: User, ip_address: str | None
    ) -> User:
        """Change a user's own login, subject to cooldown and reservations."""
        return await self._change_login(new_login, user, ip_address, force=False)

    async def change_login_forced(
        self, new_login: str, user: User, ip_address: str | None
    ) -> User:
        """Change a login on behalf of a moderator, bypassing cooldown and
        reservations."""
        return await self._change_login(new_login, user, ip_address, force=True)

    async def _change_login(
        self, new_login: str, user: User, ip_address: str | None, force: bool
    ) -> User:
        with logfire.span(
            "user_service.change_login",
            user_id=str(user.id),
            new_login=new_login,
            forced=force,
        ):
            await self._validate_username(new_login)

            if not force:
                await self._check_username_change_allowed(new_login, user)

            await self.name_record_repository.save(
                NameRecord(
                    id=NameRecordId(uuid4()),
                    user_id=user.id,
                    name=user.login,
                    change_time=datetime.now(timezone.utc),
                )
            )

            updated = user.model_copy(
                update={
                    "login": new_login,
                    "recent_ip_address": ip_address,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            updated = await self.user_repository.save(updated)

            self._broadcast_user_change(updated)
            name_change_counter.add(1)
            logfire.info(
                "Login changed",
                user_id=str(user.id),
                old_login=user.login,
                new_login=new_login,
                forced=force,
            )
            return updated

    async def _check_username_change_allowed(self, new_login: str, user: User) -> None:
        minimum_days = self.settings.user.minimum_days_between_username_change
        days_since_last_change = await self._get_days_since_last_new_record(
            user.id, minimum_days
        )
        if days_since_last_change is not None:
            raise ApiError.of(
                ErrorCode.USERNAME_CHANGE_TOO_EARLY,
                minimum_days - days_since_last_change + 1,
            )

        reservation_months = self.settings.user.username_reservation_time_in_months
        reserved_by = await self._get_last_username_owner_within_months(
            new_login, reservation_months
        )
        if reserved_by is not None and reserved_by != user.id:
            raise ApiError.of(ErrorCode.USERNAME_RESERVED, new_login, reservation_months)

    async def change_email(
        self,
        current_password: str,
        new_email: str,
        user: User,
        ip_address: str | None,
    ) -> User:
        """Change the email of a user who knows their password.

        Raises:
            ApiError: EMAIL_CHANGE_FAILED_WRONG_PASSWORD, EMAIL_INVALID or
                EMAIL_REGISTERED if another account uses the address
        """
        with logfire.span("user_service.change_email", user_id=str(user.id)):
            if not self.password_encoder.matches(current_password, user.password):
                logfire.info("Email change rejected", user_id=str(user.id))
                raise ApiError.of(ErrorCode.EMAIL_CHANGE_FAILED_WRONG_PASSWORD)

            self.email_service.validate_email_address(new_email)

            owner = await self.user_repository.find_by_email(new_email)
            if owner is not None and owner.id != user.id:
                logfire.info("Email change to a taken address", user_id=str(user.id))
                raise ApiError.of(ErrorCode.EMAIL_REGISTERED, new_email)

            updated = user.model_copy(
                update={
                    "email": new_email,
                    "recent_ip_address": ip_address,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            updated = await self.user_repository.save(updated)

            self._broadcast_user_change(updated)
            logfire.info("Email changed", user_id=str(user.id))
            return updated

    async def request_password_reset(self, identifier: str) -> None:
        """Mail a password reset link to the account matching a login or email.

        Raises:
            ApiError: UNKNOWN_IDENTIFIER
        """
        with logfire.span("user_service.request_password_reset", identifier=identifier):
            user = await self.user_repository.find_by_login(identifier)
            if user is None:
                user = await self.user_repository.find_by_email(identifier)
            if user is None:
                logfire.info("Password reset for unknown identifier")
                raise ApiError.of(ErrorCode.UNKNOWN_IDENTIFIER, identifier)

            token = self.token_service.create_token(
                TokenType.PASSWORD_RESET,
                timedelta(seconds=self.settings.registration.link_expiration_seconds),
                {KEY_USER_ID: str(user.id)},
            )
            password_reset_url = (
                self.settings.password_reset.password_reset_url_format.format(
                    username=user.login, token=token
                )
            )

            await self.email_service.send_password_reset_mail(
                user.login, user.email, password_reset_url
            )
            password_reset_counter.add(1, {"step": "request"})
            logfire.info("Password reset requested", user_id=str(user.id))

    async def perform_password_reset(self, token: str, new_password: str) -> User:
        """Set a new password using a password reset token.

        Raises:
            ApiError: TOKEN_INVALID
        """
        with logfire.span("user_service.perform_password_reset"):
            claims = self.token_service.resolve_token(TokenType.PASSWORD_RESET, token)
            user = await self._find_user_from_claims(claims)

            updated = await self._set_password(user, new_password)
            password_reset_counter.add(1, {"step": "done"})
            return updated

    async def _set_password(self, user: User, password: str) -> User:
        logfire.debug("Updating FAF password", user_id=str(user.id))
        updated = user.model_copy(
            update={
                "password": self.password_encoder.encode(password),
                "updated_at": datetime.now(timezone.utc),
            }
        )
        updated = await self.user_repository.save(updated)

        logfire.debug("Updating anope password", user_id=str(user.id))
        await self.anope_user_repository.update_password(
            updated.login, legacy_md5(password)
        )
        logfire.info("Password updated", user_id=str(user.id))
        return updated

    async def get_user(self, user_id: UserId | str) -> User:
        """Load the user an access token or moderator request refers to.

        Raises:
            ApiError: TOKEN_INVALID if the id is malformed or the user does
                not exist
        """
        if isinstance(user_id, str):
            try:
                user_id = UserId(UUID(user_id))
            except ValueError:
                logfire.warn("Malformed user id", user_id=user_id)
                raise ApiError.of(ErrorCode.TOKEN_INVALID)

        with logfire.span("user_service.get_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise ApiError.of(ErrorCode.TOKEN_INVALID)
            return user

    async def build_steam_link_url(self, user: User, callback_url: str) -> str:
        """Start linking a Steam account.

        Returns:
            Steam login URL; Steam redirects back with a link token that
            carries the user id and callback_url

        Raises:
            ApiError: STEAM_ID_UNCHANGEABLE if a Steam account is linked already
        """
        with logfire.span("user_service.build_steam_link_url", user_id=str(user.id)):
            if user.has_steam_link:
                logfire.info("User already linked to Steam", user_id=str(user.id))
                raise ApiError.of(ErrorCode.STEAM_ID_UNCHANGEABLE)

            token = self.token_service.create_token(
                TokenType.LINK_TO_STEAM,
                STEAM_LINK_TOKEN_LIFETIME,
                {KEY_USER_ID: str(user.id), KEY_STEAM_LINK_CALLBACK_URL: callback_url},
            )

            registration_counter.add(1, {"step": "steamLinkRequested"})
            redirect_url = self.settings.link_to_steam.steam_redirect_url_format.format(
                token=token
            )
            return self.steam_service.build_login_url(redirect_url)

    async def link_to_steam(self, token: str, steam_id: str) -> SteamLinkResult:
        """Complete a Steam link.

        Both ownership of Forged Alliance and uniqueness of the Steam id are
        checked, and every failed check is reported. The Steam id is only
        stored when both pass.

        Raises:
            ApiError: TOKEN_INVALID
        """
        with logfire.span("user_service.link_to_steam", steam_id=steam_id):
            claims = self.token_service.resolve_token(TokenType.LINK_TO_STEAM, token)
            user = await self._find_user_from_claims(claims)
            callback_url = claims.get(KEY_STEAM_LINK_CALLBACK_URL)
            if not callback_url:
                raise ApiError.of(ErrorCode.TOKEN_INVALID)

            errors: list[Error] = []

            if not await self.steam_service.owns_forged_alliance(steam_id):
                errors.append(Error(ErrorCode.STEAM_LINK_NO_FA_GAME))

            user_with_same_steam_id = await self.user_repository.find_by_steam_id(
                steam_id
            )
            if user_with_same_steam_id is not None:
                errors.append(
                    Error(
                        ErrorCode.STEAM_ID_ALREADY_LINKED,
                        (user_with_same_steam_id.login,),
                    )
                )

            if not errors:
                updated = user.model_copy(
                    update={
                        "steam_id": steam_id,
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
                await self.user_repository.save(updated)
                logfire.info(
                    "User linked to Steam", user_id=str(user.id), steam_id=steam_id
                )
            else:
                logfire.info(
                    "Steam link rejected",
                    user_id=str(user.id),
                    steam_id=steam_id,
                    errors=[error.code.name for error in errors],
                )

            registration_counter.add(1, {"step": "steamLinkDone"})
            return SteamLinkResult(callback_url=callback_url, errors=errors)

    async def _find_user_from_claims(self, claims: dict[str, str]) -> User:
        try:
            user_id = UserId(UUID(claims[KEY_USER_ID]))
        except (KeyError, ValueError):
            raise ApiError.of(ErrorCode.TOKEN_INVALID)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("Token refers to missing user", user_id=str(user_id))
            raise ApiError.of(ErrorCode.TOKEN_INVALID)
        return user

    async def _validate_username(self, username: str) -> None:
        if not USERNAME_PATTERN.fullmatch(username):
            raise ApiError.of(ErrorCode.USERNAME_INVALID, username)
        if await self.user_repository.exists_by_login(username):
            raise ApiError.of(ErrorCode.USERNAME_TAKEN, username)

    async def _get_last_username_owner_within_months(
        self, username: str, months: int
    ) -> UserId | None:
        """Id of the account that gave up a name inside the reservation window."""
        record = await self.name_record_repository.find_latest_by_name(username)
        if record is None:
            return None

        cutoff = months_before(datetime.now(timezone.utc), months)
        if _as_utc(record.change_time) > cutoff:
            return record.user_id
        return None

    async def _get_days_since_last_new_record(
        self, user_id: UserId, maximum_days: int
    ) -> int | None:
        """Calendar days since the user's last name change, if at most
        maximum_days ago."""
        record = await self.name_record_repository.find_latest_by_user_id(user_id)
        if record is None:
            return None

        today = datetime.now(timezone.utc).date()
        days = (today - _as_utc(record.change_time).date()).days
        if days <= maximum_days:
            return days
        return None

    def _broadcast_user_change(self, user: User) -> None:
        self.event_publisher.publish(
            UserUpdatedEvent(
                user_id=user.id,
                login=user.login,
                email=user.email,
                ip_address=user.recent_ip_address,
            )
        )
