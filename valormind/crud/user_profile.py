from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from valormind.models.user_profile import UserProfile
from valormind.schemas.profile import ProfileUpdate
from valormind.core.exceptions import ValidationError

class CRUDUserProfile(CRUDBase[UserProfile, ProfileUpdate, ProfileUpdate]):
    async def get_by_user(self, db: AsyncSession, *, user_id: str) -> Optional[UserProfile]:
        profiles, _ = await self.get_by_field(db, field="user_id", value=user_id, limit=1)
        return profiles[0] if profiles else None

    async def upsert_for_user(self, db: AsyncSession, *, user_id: str, obj_in: ProfileUpdate) -> UserProfile:
        """Update the user's profile, creating it on first save (name required)"""
        existing = await self.get_by_user(db, user_id=user_id)
        if existing:
            return await self.update(db, db_obj=existing, obj_in=obj_in)

        if not obj_in.name:
            raise ValidationError("A name is required to create a profile")
        return await self.create_with_extra(db, obj_in=obj_in, extra_data={"user_id": user_id})

user_profile_crud = CRUDUserProfile(UserProfile)
