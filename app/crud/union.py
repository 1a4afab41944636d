from typing import Optional, List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from app.models.union import Union
from app.schemas.union import UnionCreate, UnionUpdate
from app.core.exceptions import SlugTakenError


def _is_slug_violation(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "slug" in message and ("unique" in message or "duplicate" in message)


class CRUDUnion:
    """
    CRUD operations for Union model.
    
    Note: Union doesn't have union_id (it IS the tenant), so we don't
    inherit from CRUDBase.
    """
    
    def __init__(self):
        self.model = Union
    
    def get(self, db: Session, union_id: int) -> Optional[Union]:
        stmt = select(Union).where(Union.id == union_id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def get_by_slug(self, db: Session, slug: str) -> Optional[Union]:
        """
        Retrieve a union by exact slug match.
        
        Returns:
            Union instance or None; at most one row can match because of the
            unique constraint on ``slug``.
        """
        stmt = select(Union).where(Union.slug == slug)
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def slug_exists(self, db: Session, slug: str) -> bool:
        stmt = select(Union.id).where(Union.slug == slug).limit(1)
        return db.execute(stmt).first() is not None
    
    def get_multi_by_creator(self, db: Session, *, user_id: int) -> List[Union]:
        """Unions created (and so administered) by ``user_id``, newest first."""
        stmt = select(Union).where(
            Union.created_by == user_id
        ).order_by(Union.created_at.desc(), Union.id.desc())
        result = db.execute(stmt)
        return list(result.scalars().all())
    
    def create(
        self,
        db: Session,
        *,
        obj_in: UnionCreate,
        slug: str,
        created_by: int
    ) -> Union:
        """
        Insert a union with an already allocated slug.
        
        Raises:
            SlugTakenError: If another union committed the same slug first
        """
        db_obj = Union(
            name=obj_in.name,
            description=obj_in.description,
            slug=slug,
            created_by=created_by,
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if _is_slug_violation(e):
                raise SlugTakenError(slug) from e
            raise e
        db.refresh(db_obj)
        return db_obj
    
    def update(
        self,
        db: Session,
        *,
        db_obj: Union,
        obj_in: UnionUpdate | Dict[str, Any]
    ) -> Union:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        
        # Slug and ownership are fixed for the union's lifetime
        for field in ("slug", "created_by", "id"):
            update_data.pop(field, None)
        
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


# Create singleton instance
union = CRUDUnion()
