from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import select
from pydantic import BaseModel
from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD class for records owned by a union.
    
    Every read and write is filtered by an explicit union_id. The caller is
    responsible for having checked that the acting user administers that
    union before calling in here.
    
    Type Parameters:
        ModelType: SQLAlchemy model class with a ``union_id`` column
        CreateSchemaType: Pydantic schema for creating records
        UpdateSchemaType: Pydantic schema for updating records
    """
    
    def __init__(self, model: Type[ModelType]):
        self.model = model
    
    def get(self, db: Session, id: int, union_id: int) -> Optional[ModelType]:
        """
        Retrieve a single record by ID within a union.
        
        Returns:
            Model instance or None if not found or it belongs to another union
        """
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.union_id == union_id
        )
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def get_multi(
        self, 
        db: Session, 
        *, 
        skip: int = 0, 
        limit: int = 100,
        union_id: int
    ) -> List[ModelType]:
        """
        Retrieve records of one union, newest first.
        
        Args:
            db: Database session
            skip: Number of records to skip
            limit: Maximum number of records to return
            union_id: Owning union
        """
        stmt = select(self.model).where(
            self.model.union_id == union_id
        ).order_by(
            self.model.created_at.desc(), self.model.id.desc()
        ).offset(skip).limit(limit)
        result = db.execute(stmt)
        return list(result.scalars().all())
    
    def create(
        self,
        db: Session,
        *,
        obj_in: CreateSchemaType,
        union_id: int
    ) -> ModelType:
        """Create a new record attached to ``union_id``."""
        obj_data = obj_in.model_dump()
        db_obj = self.model(union_id=union_id, **obj_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
    
    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any]
    ) -> ModelType:
        """
        Update an existing record.
        
        Note: db_obj must have been loaded through get() (or an equivalent
        union-filtered query); union_id itself is never changed here.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        
        update_data.pop("union_id", None)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
