from app.crud.base import CRUDBase
from app.crud.member import member
from app.crud.union import union
from app.crud.user import user

__all__ = ["CRUDBase", "member", "union", "user"]
