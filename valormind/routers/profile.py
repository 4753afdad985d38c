from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from valormind.core.database import get_db
from valormind.core.auth import get_current_user
from valormind.core.exceptions import handle_database_errors, NotFoundError
from valormind.schemas.auth import TokenData
from valormind.crud.user_profile import user_profile_crud
from valormind.schemas.profile import ProfileUpdate, ProfileResponse

router = APIRouter()

@router.get("", response_model=ProfileResponse)
@handle_database_errors
async def get_profile(
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get the current user's profile"""
    profile = await user_profile_crud.get_by_user(db, user_id=current_user.user_id)
    if not profile:
        raise NotFoundError("UserProfile")
    return profile

@router.put("", response_model=ProfileResponse)
@handle_database_errors
async def save_profile(
    profile_update: ProfileUpdate,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create or update the current user's profile (onboarding, theme, persona)"""
    return await user_profile_crud.upsert_for_user(
        db, user_id=current_user.user_id, obj_in=profile_update
    )
