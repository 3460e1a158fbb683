import logging
from dataclasses import dataclass
from enum import StrEnum

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.config import Settings, get_settings
from app.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class OAuthAccountType(StrEnum):
    """IT account types reported by the university OAuth provider."""

    MIS = "MISEmpAcc"
    STUDENT = "StdAcc"
    ALUMNI = "AlumAcc"
    RESIGN = "EmpResiAcc"
    MANAGER = "ManAcc"
    NON_MIS = "NonMISEmpAcc"
    ORG = "OrgAcc"
    PROJECT = "ProjAcc"
    RETIRED = "RetEmpAcc"
    VIP = "VIPAcc"


class OAuthProfile(BaseModel):
    """Basic info returned by the provider's profile endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    account_name: str = Field("", alias="cmuitaccount_name")
    email: str = Field("", alias="cmuitaccount")
    student_id: str = Field("", alias="student_id")
    prename_id: str = Field("", alias="prename_id")
    prename_th: str = Field("", alias="prename_TH")
    prename_en: str = Field("", alias="prename_EN")
    first_name_th: str = Field("", alias="firstname_TH")
    first_name_en: str = Field("", alias="firstname_EN")
    last_name_th: str = Field("", alias="lastname_TH")
    last_name_en: str = Field("", alias="lastname_EN")
    organization_code: str = Field("", alias="organization_code")
    organization_name_th: str = Field("", alias="organization_name_TH")
    organization_name_en: str = Field("", alias="organization_name_EN")
    account_type_id: str = Field("", alias="itaccounttype_id")
    account_type_th: str = Field("", alias="itaccounttype_TH")
    account_type_en: str = Field("", alias="itaccounttype_EN")

    @property
    def is_student(self) -> bool:
        return self.account_type_id == OAuthAccountType.STUDENT


@dataclass(frozen=True)
class OAuthConfig:
    token_url: str
    basic_info_url: str
    client_id: str
    client_secret: str
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "OAuthConfig":
        return cls(
            token_url=settings.oauth_token_url or "",
            basic_info_url=settings.oauth_basic_info_url or "",
            client_id=settings.oauth_client_id or "",
            client_secret=settings.oauth_client_secret or "",
            timeout=settings.oauth_timeout,
        )


class OAuthClient:
    """Talks to the university OAuth provider. One instance per request is fine."""

    def __init__(self, config: OAuthConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport)

    async def exchange_code(self, code: str, redirect_uri: str) -> str:
        """Trade an authorization code for a bearer access token."""
        form = {
            "grant_type": "authorization_code",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "code": code,
            "redirect_uri": redirect_uri,
        }
        try:
            async with self._client() as client:
                resp = await client.post(self.config.token_url, data=form)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPError as e:
            logger.error("OAuth token exchange failed: %s", e)
            raise UpstreamError("Cannot get OAuth access token") from None
        except ValueError as e:
            logger.error("OAuth token endpoint returned invalid JSON: %s", e)
            raise UpstreamError("Cannot get OAuth access token") from None

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            logger.error("OAuth token response has no access_token")
            raise UpstreamError("Cannot get OAuth access token")
        return token

    async def fetch_profile(self, access_token: str) -> OAuthProfile:
        try:
            async with self._client() as client:
                resp = await client.get(
                    self.config.basic_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                resp.raise_for_status()
                return OAuthProfile.model_validate(resp.json())
        except httpx.HTTPError as e:
            logger.error("OAuth profile fetch failed: %s", e)
            raise UpstreamError("Cannot get CMU basic info") from None
        except (ValueError, ValidationError) as e:
            logger.error("OAuth profile response could not be decoded: %s", e)
            raise UpstreamError("Cannot get CMU basic info") from None


def get_oauth_client() -> OAuthClient:
    return OAuthClient(OAuthConfig.from_settings(get_settings()))
