from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models.user import User
from app.models.union import Union
from app.schemas.member import MemberCreate, MemberUpdate, MemberResponse
from app.services.member import MemberService
from app.dependencies import get_current_user, get_member_service
from app.core.union_context import get_admin_union
from app.core.logging_config import logger

router = APIRouter()


@router.get("/members", response_model=List[MemberResponse])
def get_all_my_members(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """
    Members of every union the signed-in user administers, newest first.
    
    Returns an empty list for users who administer no union.
    """
    return service.get_members_for_user(db, current_user.id, skip=skip, limit=limit)


@router.get("/unions/{slug}/members", response_model=List[MemberResponse])
def get_members(
    skip: int = 0,
    limit: int = 100,
    union: Union = Depends(get_admin_union),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """
    Retrieve the roster of one union.
    
    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100)
    
    Raises:
        HTTPException 401: If not signed in
        HTTPException 404: If the slug doesn't resolve
        HTTPException 403: If the caller is not the union's admin
    """
    return service.get_members(db, union, current_user.id, skip=skip, limit=limit)


@router.post("/unions/{slug}/members", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    member_data: MemberCreate,
    union: Union = Depends(get_admin_union),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """
    Add a member to a union's roster. Status defaults to active.
    
    Raises:
        HTTPException 401: If not signed in
        HTTPException 404: If the slug doesn't resolve
        HTTPException 403: If the caller is not the union's admin
        HTTPException 400/422: If first or last name is missing or blank
    """
    try:
        logger.info(f"Creating member: union_id={union.id}, user_id={current_user.id}")
        result = service.create_member(db, union, member_data, current_user.id)
        logger.info(f"Member created successfully: id={result.id}")
        return result
    except Exception as e:
        logger.error(f"Error creating member: {type(e).__name__}: {str(e)}")
        raise


@router.get("/unions/{slug}/members/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: int,
    union: Union = Depends(get_admin_union),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """
    Retrieve one member. 404 if it belongs to a different union.
    """
    return service.get_member(db, union, member_id, current_user.id)


@router.put("/unions/{slug}/members/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: int,
    member_data: MemberUpdate,
    union: Union = Depends(get_admin_union),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """
    Update a member of this union (partial updates supported).
    
    Raises:
        HTTPException 403: If the caller is not the union's admin
        HTTPException 404: If the member is not in this union
    """
    logger.info(f"Updating member: id={member_id}, union_id={union.id}")
    return service.update_member(db, union, member_id, member_data, current_user.id)
