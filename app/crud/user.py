from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from app.models.user import User
from app.core.security import get_password_hash


class CRUDUser:
    """
    CRUD operations for User model.
    
    Emails are stored lower-cased so lookups are case-insensitive.
    """
    
    def __init__(self):
        self.model = User
    
    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email.strip().lower())
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def get(self, db: Session, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def create(
        self,
        db: Session,
        *,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        is_active: bool = True
    ) -> User:
        """
        Create a new user with hashed password.
        
        Raises:
            ValueError: If a user with this email already exists
        """
        db_user = User(
            email=email.strip().lower(),
            hashed_password=get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            is_active=is_active
        )
        db.add(db_user)
        
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ValueError(f"User with email {email} already exists") from e
        
        db.refresh(db_user)
        return db_user
    
    def update_profile(
        self,
        db: Session,
        *,
        db_obj: User,
        first_name: str,
        last_name: str,
        email: str
    ) -> User:
        """
        Update name and email of an account.
        
        Raises:
            ValueError: If the new email belongs to another user
        """
        db_obj.first_name = first_name
        db_obj.last_name = last_name
        db_obj.email = email.strip().lower()
        db.add(db_obj)
        
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ValueError(f"User with email {email} already exists") from e
        
        db.refresh(db_obj)
        return db_obj


# Create singleton instance
user = CRUDUser()
