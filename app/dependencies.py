from typing import Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.database import get_db
from app.models.user import User
from app.core.security import get_principal_id
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.services.union import UnionService, union_service
from app.services.member import MemberService, member_service


def _bearer_token(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer "):].strip() or None


def get_current_user_optional(
    request: Request,
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the acting user from the Authorization Bearer header.
    
    Returns None for a missing, malformed or expired token, or a token whose
    user no longer exists. Never raises for authentication problems.
    """
    token = _bearer_token(request)
    if token is None:
        return None
    
    user_id = get_principal_id(token)
    if user_id is None:
        return None
    
    stmt = select(User).where(User.id == user_id)
    return db.execute(stmt).scalar_one_or_none()


def get_current_user(
    user: Optional[User] = Depends(get_current_user_optional)
) -> User:
    """
    Require an authenticated, active user.
    
    Raises:
        UnauthorizedError: If no user could be resolved from the request
        ForbiddenError: If the account is deactivated
    """
    if user is None:
        raise UnauthorizedError()
    
    if not user.is_active:
        raise ForbiddenError("Inactive user")
    
    return user


def get_union_service() -> UnionService:
    return union_service


def get_member_service() -> MemberService:
    return member_service
