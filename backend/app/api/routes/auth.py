"""
Authentication endpoints: sign-up and sign-in.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.user import UserCreate, UserResponse, UserLogin, SessionUser, SignInResponse
from app.services.auth_service import register_user, authenticate_user
from app.core.metrics import record_auth_attempt

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/sign-up", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user account."""
    try:
        user = await register_user(db, user_data)
    except HTTPException:
        record_auth_attempt("signup", success=False)
        raise
    record_auth_attempt("signup", success=True)
    return user


@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Authenticate and receive a session-backed JWT."""
    try:
        user, token = await authenticate_user(db, login_data)
    except HTTPException:
        record_auth_attempt("signin", success=False)
        raise
    record_auth_attempt("signin", success=True)
    return SignInResponse(user=SessionUser.model_validate(user), token=token)
