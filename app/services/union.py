from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.crud import union as union_crud
from app.models.union import Union
from app.schemas.union import UnionCreate, UnionUpdate
from app.services.slug import SlugAllocator, slug_allocator, normalize_slug
from app.core.config import settings
from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    SlugTakenError,
    ValidationError,
)
from app.core.logging_config import logger


class UnionService:
    """
    Service layer for unions: slug resolution, the admin check, onboarding
    and settings.
    
    The admin relation is a single field, ``Union.created_by``. It is re-read
    from the database on every check and never cached between requests.
    """
    
    def __init__(
        self,
        crud=union_crud,
        allocator: SlugAllocator = slug_allocator,
        insert_retries: Optional[int] = None
    ):
        self.crud = crud
        self.allocator = allocator
        self.insert_retries = settings.SLUG_INSERT_RETRIES if insert_retries is None else insert_retries
    
    def find_tenant(self, db: Session, slug: str) -> Optional[Union]:
        return self.crud.get_by_slug(db, slug)
    
    def resolve_tenant(self, db: Session, slug: str) -> Union:
        """
        Map a slug to its union.
        
        Raises:
            NotFoundError: If no union has this slug
        """
        union = self.find_tenant(db, slug)
        if union is None:
            raise NotFoundError("Union not found")
        return union
    
    def is_admin(self, db: Session, principal_id: Optional[int], union_id: int) -> bool:
        """
        True iff ``principal_id`` created the union.
        
        Denies when there is no principal, when the union is missing and when
        the lookup itself fails.
        """
        if principal_id is None:
            return False
        try:
            union = self.crud.get(db, union_id)
        except SQLAlchemyError as e:
            logger.error(f"Admin check failed for union_id={union_id}: {type(e).__name__}: {str(e)}")
            return False
        if union is None:
            return False
        return union.created_by == principal_id
    
    def require_admin(self, db: Session, principal_id: Optional[int], union: Union) -> None:
        """
        Raises:
            ForbiddenError: If the principal does not administer ``union``
        """
        if not self.is_admin(db, principal_id, union.id):
            logger.warning(f"Denied union access: user_id={principal_id}, union_id={union.id}")
            raise ForbiddenError()
    
    def get_admin_unions(self, db: Session, user_id: int) -> List[Union]:
        return self.crud.get_multi_by_creator(db, user_id=user_id)
    
    def create_union(self, db: Session, union_data: UnionCreate, created_by: int) -> Union:
        """
        Create a union owned by ``created_by`` with a freshly allocated slug.
        
        The insert is the authority on slug uniqueness. When it loses a race
        the slug is re-allocated; after ``insert_retries`` losses a single
        timestamp-suffixed attempt is made before giving up.
        
        Raises:
            ValidationError: If the name is blank
            ConflictError: If no slug could be inserted
        """
        name = union_data.name.strip()
        if not name:
            raise ValidationError("Union name is required")
        description = union_data.description.strip() if union_data.description else None
        obj_in = UnionCreate(name=name, description=description or None)
        
        for attempt in range(self.insert_retries):
            slug = self.allocator.allocate(db, name)
            try:
                return self.crud.create(db, obj_in=obj_in, slug=slug, created_by=created_by)
            except SlugTakenError:
                logger.warning(f"Slug '{slug}' taken at insert (attempt {attempt + 1}), re-allocating")
        
        slug = self.allocator.timestamp_slug(normalize_slug(name))
        try:
            return self.crud.create(db, obj_in=obj_in, slug=slug, created_by=created_by)
        except SlugTakenError:
            logger.error(f"Could not allocate a slug for union name '{name}'")
            raise ConflictError("Could not allocate a unique address for this union, please try again")
    
    def update_union(self, db: Session, union: Union, union_data: UnionUpdate) -> Union:
        """
        Update name and/or description. The slug never changes.
        
        Raises:
            ValidationError: If a name is given but blank
        """
        update_data = union_data.model_dump(exclude_unset=True)
        if "name" in update_data:
            name = (update_data["name"] or "").strip()
            if not name:
                raise ValidationError("Union name is required")
            update_data["name"] = name
        if "description" in update_data:
            description = (update_data["description"] or "").strip()
            update_data["description"] = description or None
        
        return self.crud.update(db, db_obj=union, obj_in=update_data)


# Create a singleton instance
union_service = UnionService()
