import enum
from sqlalchemy import Column, Integer, String, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class MemberStatus(str, enum.Enum):
    active = "active"
    pending = "pending"
    inactive = "inactive"

class Member(Base, TimestampMixin):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    union_id = Column(Integer, ForeignKey("unions.id", ondelete="CASCADE"), nullable=False, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    member_number = Column(String, nullable=True)
    status = Column(Enum(MemberStatus, name="member_status"), nullable=False, default=MemberStatus.active)
    date_joined = Column(Date, nullable=True)

    union = relationship("Union", back_populates="members")
