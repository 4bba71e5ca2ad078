"""Session endpoints — auth status and logout.

Login and registration belong to the auth service, which sets the
``user_id`` session key; this API only reads and clears it.
"""

from fastapi import APIRouter, Depends, Request

from app.application.schemas import AuthStatusResponse, LogoutResponse, UserResponse
from app.application.services import ProfileService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_optional_user_id, get_profile_service

router = APIRouter(tags=["Auth"])


@router.get("/auth/status", response_model=AuthStatusResponse, response_model_exclude_none=True)
async def auth_status(
    user_id: int | None = Depends(get_optional_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> AuthStatusResponse:
    if user_id is None:
        return AuthStatusResponse(authenticated=False)
    try:
        user = await service.get_profile(user_id)
    except EntityNotFoundError:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(
        authenticated=True,
        user=UserResponse.model_validate(user, from_attributes=True),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(request: Request) -> LogoutResponse:
    request.session.clear()
    return LogoutResponse()
