from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.crud.base import CRUDBase
from app.models.member import Member
from app.schemas.member import MemberCreate, MemberUpdate


class CRUDMember(CRUDBase[Member, MemberCreate, MemberUpdate]):
    """
    CRUD operations for Member model.
    
    Members have no delete path; the standard get/get_multi/create/update
    from CRUDBase cover the roster pages.
    """

    def get_multi_for_unions(
        self,
        db: Session,
        *,
        union_ids: List[int],
        skip: int = 0,
        limit: int = 100
    ) -> List[Member]:
        """
        Members across several unions, newest first.
        
        Args:
            db: Database session
            union_ids: Unions the caller administers
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        if not union_ids:
            return []
        stmt = select(Member).where(
            Member.union_id.in_(union_ids)
        ).order_by(
            Member.created_at.desc(), Member.id.desc()
        ).offset(skip).limit(limit)
        result = db.execute(stmt)
        return list(result.scalars().all())


# Create a singleton instance
member = CRUDMember(Member)
