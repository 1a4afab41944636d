from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.models.union import Union
from app.dependencies import get_current_user, get_union_service
from app.services.union import UnionService


def get_union(
    slug: str,
    _current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: UnionService = Depends(get_union_service)
) -> Union:
    """
    FastAPI dependency resolving the ``{slug}`` path segment to a union.

    Authentication runs first, so an anonymous request gets 401 before it
    can learn whether a slug exists. This does NOT check admin rights;
    routes touching union data depend on get_admin_union instead.
    
    Raises:
        UnauthorizedError: If the request is not authenticated
        NotFoundError: If no union has this slug
    """
    return service.resolve_tenant(db, slug)


def get_admin_union(
    union: Union = Depends(get_union),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: UnionService = Depends(get_union_service)
) -> Union:
    """
    Like get_union, but also requires the acting user to be its admin.
    
    Raises:
        ForbiddenError: If the user did not create this union
    """
    service.require_admin(db, current_user.id, union)
    return union
