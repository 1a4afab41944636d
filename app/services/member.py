from typing import List
from sqlalchemy.orm import Session
from app.crud import member as member_crud
from app.crud import union as union_crud
from app.schemas.member import MemberCreate, MemberUpdate
from app.models.member import Member
from app.models.union import Union
from app.services.union import UnionService, union_service
from app.core.exceptions import NotFoundError, ValidationError

REQUIRED_FIELDS = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
}


def _clean_required(data: dict) -> dict:
    """Strip required text fields and reject blanks (and explicit nulls)."""
    for field, message in REQUIRED_FIELDS.items():
        if field not in data:
            continue
        value = (data[field] or "").strip()
        if not value:
            raise ValidationError(message)
        data[field] = value
    if "status" in data and data["status"] is None:
        raise ValidationError("Status is required")
    return data


class MemberService:
    """
    Service layer for the member roster.
    
    Every operation takes the already resolved union and the acting user's
    id, and runs the admin check itself before touching member rows, so a
    caller cannot skip it.
    """
    
    def __init__(self, crud=member_crud, unions: UnionService = union_service, unions_crud=union_crud):
        self.crud = crud
        self.unions = unions
        self.unions_crud = unions_crud
    
    def get_members(
        self,
        db: Session,
        union: Union,
        principal_id: int,
        skip: int = 0,
        limit: int = 100
    ) -> List[Member]:
        """
        List a union's members, newest first.
        
        Raises:
            ForbiddenError: If principal_id is not the union's admin
        """
        self.unions.require_admin(db, principal_id, union)
        return self.crud.get_multi(db=db, skip=skip, limit=limit, union_id=union.id)
    
    def get_member(
        self,
        db: Session,
        union: Union,
        member_id: int,
        principal_id: int
    ) -> Member:
        """
        Raises:
            ForbiddenError: If principal_id is not the union's admin
            NotFoundError: If the member doesn't exist in this union
        """
        self.unions.require_admin(db, principal_id, union)
        member = self.crud.get(db=db, id=member_id, union_id=union.id)
        if not member:
            raise NotFoundError("Member not found")
        return member
    
    def create_member(
        self,
        db: Session,
        union: Union,
        member_data: MemberCreate,
        principal_id: int
    ) -> Member:
        """
        Add a member to the union's roster.
        
        Raises:
            ForbiddenError: If principal_id is not the union's admin
            ValidationError: If first or last name is blank
        """
        self.unions.require_admin(db, principal_id, union)
        data = _clean_required(member_data.model_dump())
        return self.crud.create(db=db, obj_in=MemberCreate(**data), union_id=union.id)
    
    def update_member(
        self,
        db: Session,
        union: Union,
        member_id: int,
        member_data: MemberUpdate,
        principal_id: int
    ) -> Member:
        """
        Partially update a member of this union.
        
        Raises:
            ForbiddenError: If principal_id is not the union's admin
            NotFoundError: If the member doesn't exist in this union
            ValidationError: If first or last name is set to blank
        """
        member = self.get_member(db=db, union=union, member_id=member_id, principal_id=principal_id)
        data = _clean_required(member_data.model_dump(exclude_unset=True))
        return self.crud.update(db=db, db_obj=member, obj_in=data)
    
    def get_members_for_user(
        self,
        db: Session,
        user_id: int,
        skip: int = 0,
        limit: int = 100
    ) -> List[Member]:
        """Members of every union ``user_id`` administers."""
        union_ids = [u.id for u in self.unions_crud.get_multi_by_creator(db, user_id=user_id)]
        return self.crud.get_multi_for_unions(db=db, union_ids=union_ids, skip=skip, limit=limit)


# Create a singleton instance
member_service = MemberService()
