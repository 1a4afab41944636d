from app.services.slug import slug_allocator, normalize_slug
from app.services.union import union_service
from .member import member_service

__all__ = ["slug_allocator", "normalize_slug", "union_service", "member_service"]
