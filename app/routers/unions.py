from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models.user import User
from app.models.union import Union
from app.schemas.union import UnionCreate, UnionUpdate, UnionResponse
from app.services.union import UnionService
from app.dependencies import get_current_user, get_union_service
from app.core.union_context import get_admin_union
from app.core.logging_config import logger

router = APIRouter()


@router.get("", response_model=List[UnionResponse])
def get_my_unions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: UnionService = Depends(get_union_service)
):
    """
    Unions the signed-in user administers, newest first.
    
    Clients send users with an empty list to onboarding and everyone else to
    the first union's dashboard.
    """
    return service.get_admin_unions(db, current_user.id)


@router.post("", response_model=UnionResponse, status_code=status.HTTP_201_CREATED)
def create_union(
    union_data: UnionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    service: UnionService = Depends(get_union_service)
):
    """
    Create a union (onboarding). The caller becomes its admin.
    
    The slug is derived from the name and is never accepted from the client.
    
    Raises:
        HTTPException 400: If the name is blank
        HTTPException 409: If no unique slug could be inserted
    """
    try:
        logger.info(f"Creating union: name={union_data.name!r}, user_id={current_user.id}")
        result = service.create_union(db, union_data, created_by=current_user.id)
        logger.info(f"Union created successfully: id={result.id}, slug={result.slug}")
        return result
    except Exception as e:
        logger.error(f"Error creating union: {type(e).__name__}: {str(e)}")
        raise


@router.get("/{slug}", response_model=UnionResponse)
def get_union_detail(union: Union = Depends(get_admin_union)):
    """
    Union settings for its admin.
    
    Raises:
        HTTPException 404: If the slug doesn't resolve
        HTTPException 403: If the caller is not the admin
    """
    return union


@router.put("/{slug}", response_model=UnionResponse)
def update_union(
    union_data: UnionUpdate,
    union: Union = Depends(get_admin_union),
    db: Session = Depends(get_db),
    service: UnionService = Depends(get_union_service)
):
    """
    Rename a union or change its description. The slug stays the same.
    """
    logger.info(f"Updating union: id={union.id}")
    return service.update_union(db, union, union_data)
