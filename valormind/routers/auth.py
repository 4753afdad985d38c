from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from valormind.schemas.auth import (
    UserSignUp,
    UserSignIn,
    AuthResponse,
    TokenData,
    SignOutResponse,
    UserInfoResponse,
    StatusResponse
)
from valormind.services.supabase_service import supabase_service
from valormind.core.auth import get_current_user, security
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

def convert_supabase_session(session, user) -> Optional[Dict[str, Any]]:
    """Convert Supabase session and user objects to our format"""
    if not session or not user:
        return None

    return {
        "access_token": getattr(session, 'access_token', ''),
        "refresh_token": getattr(session, 'refresh_token', ''),
        "expires_in": getattr(session, 'expires_in', 3600),
        "token_type": getattr(session, 'token_type', 'bearer'),
        "user": {
            "id": getattr(user, 'id', ''),
            "email": getattr(user, 'email', ''),
            "email_confirmed_at": getattr(user, 'email_confirmed_at', None),
            "last_sign_in_at": getattr(user, 'last_sign_in_at', None),
            "created_at": getattr(user, 'created_at', None),
            "updated_at": getattr(user, 'updated_at', None),
            "user_metadata": getattr(user, 'user_metadata', {})
        }
    }


def _require_supabase():
    if not supabase_service.supabase:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service is not configured"
        )


router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Sign up new user",
    description="Create a new user account with email and password"
)
async def sign_up(user_data: UserSignUp):
    """Sign up a new user with Supabase"""
    _require_supabase()
    result = await supabase_service.sign_up(
        email=user_data.email,
        password=user_data.password,
        metadata={"name": user_data.name} if user_data.name else None
    )

    if not result["success"]:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.get("error", "Sign up failed")
        )

    return AuthResponse(
        success=True,
        message="User created successfully. Please check your email for verification.",
        session=convert_supabase_session(result.get("session"), result.get("user"))
    )


@router.post(
    "/signin",
    response_model=AuthResponse,
    summary="Sign in user",
    description="Authenticate user with email and password"
)
async def sign_in(user_credentials: UserSignIn):
    """Sign in a user with Supabase"""
    _require_supabase()
    result = await supabase_service.sign_in(
        email=user_credentials.email,
        password=user_credentials.password
    )

    if not result["success"]:
        logger.info("Sign in rejected")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.get("error", "Invalid credentials")
        )

    return AuthResponse(
        success=True,
        message="Signed in successfully",
        session=convert_supabase_session(result.get("session"), result.get("user"))
    )


@router.post(
    "/signout",
    response_model=SignOutResponse,
    summary="Sign out user",
    description="Sign out the currently authenticated user"
)
async def sign_out(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    current_user: TokenData = Depends(get_current_user)
):
    """Sign out the currently authenticated user"""
    _require_supabase()
    result = await supabase_service.sign_out(credentials.credentials)
    return SignOutResponse(
        success=True,
        message=result.get("message", "Signed out successfully")
    )


@router.get(
    "/me",
    response_model=UserInfoResponse,
    summary="Get current user info",
    description="Get information about the currently authenticated user"
)
async def get_current_user_info(current_user: TokenData = Depends(get_current_user)):
    """Get current user information"""
    return UserInfoResponse(
        success=True,
        user={
            "id": current_user.user_id,
            "email": current_user.email
        }
    )


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Check auth service status",
    description="Check if the authentication service and Supabase integration are working"
)
async def auth_status():
    """Check authentication service status"""
    return StatusResponse(
        success=True,
        message="Authentication service is running",
        supabase_configured=bool(supabase_service.supabase)
    )
