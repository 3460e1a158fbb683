import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthorizationDenied
from app.models.user import User
from app.services.user_service import UserService
from app.utils.oauth import OAuthClient
from app.utils.tokens import ProfileClaims, SessionTokenIssuer

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    token: str
    user: Optional[User] = None


class AuthService:
    """Staff login through the university OAuth provider."""

    def __init__(self, db: AsyncSession, oauth: OAuthClient, issuer: SessionTokenIssuer):
        self.db = db
        self.oauth = oauth
        self.issuer = issuer
        self.users = UserService(db)

    async def login(self, code: str, redirect_uri: str) -> LoginResult:
        """
        Exchange the authorization code and sign the caller in.

        Registered staff get an admin token and their user record. A student
        with no user record still gets a visitor token so they can queue;
        anyone else without a record is refused.
        """
        access_token = await self.oauth.exchange_code(code, redirect_uri)
        profile = await self.oauth.fetch_profile(access_token)
        source = ProfileClaims(profile)

        user = await self.users.get_by_email(profile.email)
        if user is None:
            if profile.is_student:
                logger.info("Unregistered student %s signed in as visitor", profile.email)
                return LoginResult(token=self.issuer.issue(source, visitor=True))
            logger.warning(
                "Login refused for %s (account type %r)", profile.email, profile.account_type_id
            )
            raise AuthorizationDenied("Cannot access")

        token = self.issuer.issue(source, visitor=False)
        if not user.has_english_name():
            user = await self.users.backfill_names(user, profile)
        return LoginResult(token=token, user=user)
