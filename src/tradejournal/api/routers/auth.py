"""Sign-up, sign-in and session endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from tradejournal.api.deps import get_bearer_token, get_current_user, get_identity_service
from tradejournal.api.schemas import CredentialsRequest, SessionResponse, UserResponse
from tradejournal.domain.models import AuthSession, User
from tradejournal.services import IdentityService

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(user: User, session: AuthSession) -> SessionResponse:
    return SessionResponse(
        access_token=session.token,
        expires_at=session.expires_at,
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    data: CredentialsRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> SessionResponse:
    """Register a new account and return a bearer session."""
    user, session = identity.sign_up(data.email, data.password)
    return _session_response(user, session)


@router.post("/signin", response_model=SessionResponse)
def sign_in(
    data: CredentialsRequest,
    identity: IdentityService = Depends(get_identity_service),
) -> SessionResponse:
    session = identity.sign_in(data.email, data.password)
    return _session_response(identity.resolve(session.token), session)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityService = Depends(get_identity_service),
) -> Response:
    """Revoke the current session."""
    identity.get_session(token)
    identity.sign_out(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
