from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.schemas.auth import SessionClaims
from app.services.user_service import UserService
from app.utils.tokens import SessionTokenIssuer, get_token_issuer

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str, issuer: SessionTokenIssuer) -> SessionClaims:
    try:
        return issuer.decode(token)
    except (JWTError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    issuer: Annotated[SessionTokenIssuer, Depends(get_token_issuer)],
) -> SessionClaims:
    """Claims of any session token holder, visitor or staff."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return decode_token(credentials.credentials, issuer)


async def get_current_staff(
    claims: Annotated[SessionClaims, Depends(get_current_claims)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Resolve the token's email to a staff user.

    Visitor tokens either have no email or belong to a student with no user
    record; both are refused.
    """
    user = None
    if claims.email:
        user = await UserService(db).get_by_email(claims.email)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Staff access required",
        )
    return user


# Type aliases for dependency injection
CurrentClaims = Annotated[SessionClaims, Depends(get_current_claims)]
CurrentStaff = Annotated[User, Depends(get_current_staff)]
