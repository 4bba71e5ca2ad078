"""Profile endpoints for the signed-in user."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    ProfileUserResponse,
    UserResponse,
)
from app.application.services import ProfileService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError, ValidationError
from app.infrastructure.dependencies import get_current_user_id, get_profile_service

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(
    user_id: int = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    try:
        user = await service.get_profile(user_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return ProfileResponse(user=ProfileUserResponse.model_validate(user, from_attributes=True))


@router.put("", response_model=ProfileUpdateResponse)
async def update_profile(
    data: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileUpdateResponse:
    try:
        user = await service.update_profile(user_id, data.name, data.email)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already taken by another user",
        )
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return ProfileUpdateResponse(user=UserResponse.model_validate(user, from_attributes=True))
