import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from jose import jwt
from jose.exceptions import JOSEError

from app.config import Settings, get_settings
from app.exceptions import TokenSigningError
from app.schemas.auth import SessionClaims
from app.utils.oauth import OAuthProfile

logger = logging.getLogger(__name__)


def capitalize_name(value: str) -> str:
    """'somchai' and 'SOMCHAI' both become 'Somchai'."""
    return value[:1].upper() + value[1:].lower()


class ClaimSource(Protocol):
    def claims(self, visitor: bool) -> SessionClaims: ...


@dataclass(frozen=True)
class ProfileClaims:
    """Claims for a caller who came through the OAuth provider."""

    profile: OAuthProfile

    def claims(self, visitor: bool) -> SessionClaims:
        p = self.profile
        first_name = p.first_name_th or capitalize_name(p.first_name_en)
        last_name = p.last_name_th or capitalize_name(p.last_name_en)
        return SessionClaims(
            email=p.email,
            first_name=first_name,
            last_name=last_name,
            faculty=p.organization_name_th,
            # Staff tokens never carry a student id
            student_id=p.student_id if visitor and p.student_id else None,
        )


@dataclass(frozen=True)
class NameClaims:
    """Claims for an anonymous visitor who only typed a name."""

    first_name: str
    last_name: str

    def claims(self, visitor: bool) -> SessionClaims:
        return SessionClaims(first_name=self.first_name, last_name=self.last_name)


class SessionTokenIssuer:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta | None = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionTokenIssuer":
        expires_delta = None
        if settings.session_token_expire_minutes:
            expires_delta = timedelta(minutes=settings.session_token_expire_minutes)
        return cls(settings.secret_key, settings.jwt_algorithm, expires_delta)

    def build_claims(self, source: ClaimSource, visitor: bool) -> dict[str, Any]:
        claims = source.claims(visitor)
        if self.expires_delta is not None:
            expire = datetime.now(timezone.utc) + self.expires_delta
            claims.exp = int(expire.timestamp())
        return claims.model_dump(by_alias=True, exclude_none=True)

    def issue(self, source: ClaimSource, visitor: bool) -> str:
        to_encode = self.build_claims(source, visitor)
        try:
            return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        except JOSEError as e:
            logger.error("Failed to sign session token: %s", e)
            raise TokenSigningError() from None

    def decode(self, token: str) -> SessionClaims:
        """Raises ``JWTError`` on a bad signature or an expired ``exp``."""
        payload = jwt.decode(
            token,
            self.secret_key,
            algorithms=[self.algorithm],
            options={"verify_exp": True},
        )
        return SessionClaims.model_validate(payload)


def get_token_issuer() -> SessionTokenIssuer:
    return SessionTokenIssuer.from_settings(get_settings())
