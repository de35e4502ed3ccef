import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from hotel_booking.db import get_db
from hotel_booking.models.user import User
from hotel_booking.schemas.user import Token, UserCreate, UserResponse
from hotel_booking.utils.auth import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_password_hash,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["auth"],
)


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """
    Create a user account that can log in and own bookings.

    - **username**: Unique login name.
    - **email**: Contact address.
    - **password**: Plain password, stored hashed.
    """
    if db.query(User).filter(User.username == user.username).first():
        logger.error(f"Username already registered: {user.username}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already registered",
        )
    db_user = User(
        username=user.username,
        email=user.email,
        hashed_password=get_password_hash(user.password),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.debug(f"Registered user: {db_user.username}")
    return db_user


@router.post("/login", response_model=Token, summary="Log in and get a token")
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Exchange username and password (form fields) for a bearer token."""
    user = authenticate_user(db, form_data.username, form_data.password)
    if user is None:
        logger.error(f"Failed login for username: {form_data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token = create_access_token({"sub": user.username})
    logger.debug(f"Issued token for user: {user.username}")
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/user", response_model=UserResponse, summary="Current user")
def read_current_user(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    return db.query(User).filter(User.id == current_user["id"]).first()
