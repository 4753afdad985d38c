from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from typing import Optional
import asyncio
import logging
from valormind.services.supabase_service import supabase_service
from valormind.schemas.auth import TokenData
from valormind.core.config import settings

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)

def decode_access_token(token: str) -> Optional[TokenData]:
    """Verify a Supabase JWT locally with the project's JWT secret"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience="authenticated",
        )
    except JWTError as e:
        logger.debug(f"Local JWT decode failed: {e}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None
    return TokenData(user_id=user_id, email=payload.get("email") or "")

async def resolve_token(token: str) -> Optional[TokenData]:
    """Local decode first, then ask Supabase"""
    token_data = decode_access_token(token)
    if token_data:
        return token_data

    if not supabase_service.supabase:
        return None

    try:
        user_result = await asyncio.wait_for(supabase_service.get_user(token), timeout=3.0)
    except asyncio.TimeoutError:
        logger.warning("⚠️ Supabase auth timeout")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="Authentication service timeout"
        )

    if user_result["success"] and user_result.get("user"):
        user = user_result["user"]
        return TokenData(user_id=user.id, email=user.email or "")
    return None

async def verify_token(credentials: HTTPAuthorizationCredentials = Depends(security)) -> TokenData:
    """Verify JWT token and return user data"""
    token_data = await resolve_token(credentials.credentials)
    if not token_data:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token_data

async def get_current_user(token_data: TokenData = Depends(verify_token)) -> TokenData:
    """Get current authenticated user"""
    return token_data

async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security)
) -> Optional[TokenData]:
    """Current user when a valid bearer token is sent, otherwise None"""
    if not credentials:
        return None
    return await resolve_token(credentials.credentials)
