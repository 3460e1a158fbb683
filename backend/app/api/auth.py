from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import LoginRequest, LoginResponse, SessionClaims
from app.schemas.user import UserResponse
from app.services.auth_service import AuthService
from app.utils.auth import CurrentClaims
from app.utils.oauth import OAuthClient, get_oauth_client
from app.utils.tokens import SessionTokenIssuer, get_token_issuer

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse, response_model_exclude_unset=True)
async def login(
    body: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    oauth: Annotated[OAuthClient, Depends(get_oauth_client)],
    issuer: Annotated[SessionTokenIssuer, Depends(get_token_issuer)],
) -> LoginResponse:
    result = await AuthService(db, oauth, issuer).login(body.code, body.redirect_uri)
    await db.commit()

    if result.user is None:
        # Unregistered students get the token alone, without a user key
        return LoginResponse(token=result.token)
    return LoginResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.get("/session", response_model=SessionClaims, response_model_exclude_none=True)
async def get_session(claims: CurrentClaims) -> SessionClaims:
    return claims
