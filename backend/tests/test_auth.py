import httpx
import pytest
import respx
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models import User
from app.utils.tokens import get_token_issuer

settings = get_settings()

LOGIN_URL = "/api/v1/auth/login"
LOGIN_BODY = {"code": "auth-code", "redirectUri": "https://queue.test/callback"}


def mock_provider(router, profile: dict):
    token_route = router.post(settings.oauth_token_url).mock(
        return_value=httpx.Response(200, json={"access_token": "provider-token"})
    )
    info_route = router.get(settings.oauth_basic_info_url).mock(
        return_value=httpx.Response(200, json=profile)
    )
    return token_route, info_route


class TestLoginValidation:
    """Malformed requests are refused before the provider is contacted."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"redirectUri": "https://queue.test/callback"},
            {"code": "auth-code"},
            {"code": "", "redirectUri": "https://queue.test/callback"},
            {"code": "auth-code", "redirectUri": ""},
            {},
        ],
    )
    async def test_missing_fields_rejected_without_outbound_call(
        self, client: AsyncClient, staff_profile_data, body
    ):
        with respx.mock(assert_all_called=False) as router:
            token_route, info_route = mock_provider(router, staff_profile_data)
            response = await client.post(LOGIN_URL, json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation error"
        assert not token_route.called
        assert not info_route.called


class TestStaffLogin:
    @pytest.mark.asyncio
    async def test_registered_staff_gets_admin_token_and_user(
        self, client: AsyncClient, staff_user, staff_profile_data
    ):
        with respx.mock as router:
            mock_provider(router, staff_profile_data)
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == staff_user.email
        assert data["user"]["id"] == staff_user.id
        assert data["user"]["counterId"] is None

        claims = get_token_issuer().decode(data["token"])
        assert claims.email == staff_user.email
        assert claims.first_name == "สมศรี"
        assert claims.faculty == "สำนักทะเบียนและประมวลผล"
        assert claims.student_id is None

    @pytest.mark.asyncio
    async def test_missing_english_names_are_backfilled(
        self, client: AsyncClient, db_session: AsyncSession, staff_user, staff_profile_data
    ):
        with respx.mock as router:
            mock_provider(router, staff_profile_data)
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 200
        user_data = response.json()["user"]
        assert user_data["firstNameEN"] == "SOMSRI"
        assert user_data["lastNameEN"] == "JAIDEE"
        assert user_data["firstNameTH"] == "สมศรี"

        result = await db_session.execute(select(User).where(User.email == staff_user.email))
        stored = result.scalar_one()
        await db_session.refresh(stored)
        assert stored.first_name_en == "SOMSRI"
        assert stored.last_name_en == "JAIDEE"

    @pytest.mark.asyncio
    async def test_existing_english_names_are_kept(
        self, client: AsyncClient, db_session: AsyncSession, staff_user, staff_profile_data
    ):
        staff_user.first_name_en = "Somsri"
        staff_user.last_name_en = "Jaidee"
        await db_session.commit()

        with respx.mock as router:
            mock_provider(router, staff_profile_data)
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 200
        assert response.json()["user"]["firstNameEN"] == "Somsri"


class TestUnregisteredLogin:
    @pytest.mark.asyncio
    async def test_unknown_student_gets_visitor_token_only(
        self, client: AsyncClient, student_profile_data
    ):
        with respx.mock as router:
            mock_provider(router, student_profile_data)
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 200
        data = response.json()
        assert "user" not in data

        claims = get_token_issuer().decode(data["token"])
        assert claims.first_name == "Somchai"
        assert claims.last_name == "Dee"
        assert claims.student_id == "650610001"

    @pytest.mark.asyncio
    async def test_unknown_non_student_is_denied(self, client: AsyncClient, staff_profile_data):
        profile = dict(staff_profile_data, cmuitaccount="stranger@cmu.ac.th")
        with respx.mock as router:
            mock_provider(router, profile)
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 403
        assert response.json()["detail"] == "Cannot access"


class TestProviderFailures:
    @pytest.mark.asyncio
    async def test_token_exchange_failure(self, client: AsyncClient, staff_profile_data):
        with respx.mock(assert_all_called=False) as router:
            router.post(settings.oauth_token_url).mock(return_value=httpx.Response(400))
            info_route = router.get(settings.oauth_basic_info_url).mock(
                return_value=httpx.Response(200, json=staff_profile_data)
            )
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot get OAuth access token"
        assert not info_route.called

    @pytest.mark.asyncio
    async def test_profile_fetch_failure(self, client: AsyncClient):
        with respx.mock as router:
            router.post(settings.oauth_token_url).mock(
                return_value=httpx.Response(200, json={"access_token": "provider-token"})
            )
            router.get(settings.oauth_basic_info_url).mock(return_value=httpx.Response(500))
            response = await client.post(LOGIN_URL, json=LOGIN_BODY)

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot get CMU basic info"


class TestSession:
    @pytest.mark.asyncio
    async def test_session_returns_claims(self, client: AsyncClient, visitor_headers):
        response = await client.get("/api/v1/auth/session", headers=visitor_headers)
        assert response.status_code == 200
        assert response.json() == {"firstName": "Walk", "lastName": "In"}

    @pytest.mark.asyncio
    async def test_session_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/session")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_fails(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/session",
            headers={"Authorization": "Bearer invalid-token"},
        )
        assert response.status_code == 401
