from .member import Member, MemberStatus
from .union import Union
from .user import User
