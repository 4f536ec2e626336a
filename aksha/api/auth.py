"""Auth API: identity exchange with the backend and local session."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from aksha.core.deps import get_auth_service
from aksha.schemas.auth import AuthStatus, LoginRequest, UserProfile
from aksha.services.api_client import ApiError
from aksha.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserProfile)
async def login(data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """Exchange the identity-provider id for a backend token."""
    try:
        return await auth.login(data.clerk_id, data.session_id, data.session_token)
    except ApiError as e:
        if e.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.post("/logout", response_model=AuthStatus)
def logout(auth: AuthService = Depends(get_auth_service)):
    auth.logout()
    return AuthStatus(authenticated=False)


@router.get("/status", response_model=AuthStatus)
def auth_status(auth: AuthService = Depends(get_auth_service)):
    return AuthStatus(authenticated=auth.is_authenticated())


@router.get("/me", response_model=UserProfile)
def me(auth: AuthService = Depends(get_auth_service)):
    """Profile cached at login."""
    user = auth.get_current_user()
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return user


@router.get("/profile", response_model=UserProfile)
async def profile(auth: AuthService = Depends(get_auth_service)):
    """Profile fetched from the backend (verifies the token)."""
    try:
        return await auth.get_profile()
    except ApiError as e:
        if e.status_code == status.HTTP_401_UNAUTHORIZED:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
