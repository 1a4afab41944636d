from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.user import SignUpRequest, SignInRequest, UserUpdate, UserResponse, AuthResponse
from app.core.config import settings
from app.core.security import verify_password, create_access_token
from app.core.exceptions import ConflictError, ForbiddenError, UnauthorizedError, ValidationError
from app.core.logging_config import logger
from app.crud.user import user as user_crud
from app.dependencies import get_current_user

router = APIRouter()


def _issue_token(user: User) -> AuthResponse:
    access_token = create_access_token(
        data={
            "id": str(user.id),
            "email": user.email,
        }
    )
    return AuthResponse(user=UserResponse.model_validate(user), access_token=access_token)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(data: SignUpRequest, db: Session = Depends(get_db)):
    """
    Create an account and sign it in.
    
    Raises:
        HTTPException 400: If the password is too short
        HTTPException 409: If the email is already registered
    """
    if len(data.password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long"
        )
    
    if user_crud.get_by_email(db, email=data.email):
        raise ConflictError("User with this email already exists")
    
    try:
        user = user_crud.create(
            db=db,
            email=data.email,
            password=data.password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
    except ValueError:
        raise ConflictError("User with this email already exists")
    
    logger.info(f"User signed up: id={user.id}")
    return _issue_token(user)


@router.post("/signin", response_model=AuthResponse)
def sign_in(credentials: SignInRequest, db: Session = Depends(get_db)):
    """
    Verify credentials and return a bearer token.
    
    Raises:
        HTTPException 401: If the email/password pair is wrong
        HTTPException 403: If the account is deactivated
    """
    user = user_crud.get_by_email(db, email=credentials.email)
    
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise UnauthorizedError("Incorrect email or password")
    
    if not user.is_active:
        raise ForbiddenError("Inactive user")
    
    return _issue_token(user)


@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/me", response_model=UserResponse)
def update_me(
    data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update first name, last name and email of the signed-in account.
    
    Raises:
        HTTPException 400: If a name is blank
        HTTPException 409: If the email belongs to another account
    """
    first_name = data.first_name.strip()
    last_name = data.last_name.strip()
    if not first_name or not last_name:
        raise ValidationError("First name, last name, and email are required")
    
    try:
        user = user_crud.update_profile(
            db=db,
            db_obj=current_user,
            first_name=first_name,
            last_name=last_name,
            email=data.email,
        )
    except ValueError:
        raise ConflictError("User with this email already exists")
    
    logger.info(f"User profile updated: id={user.id}")
    return user
