from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class Union(Base, TimestampMixin):
    """
    A union is the tenant. Its creator is its only admin; there is no
    membership or role table.
    """
    __tablename__ = "unions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Unique constraint is the authority for slug allocation races
    slug = Column(String, nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)

    creator = relationship("User", back_populates="unions")
    members = relationship("Member", back_populates="union")
