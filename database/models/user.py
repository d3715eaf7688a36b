from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class User(Base):
    """
    Account record keyed by the identity provider's subject id.

    Written only by the sync operation; never deleted by normal flow.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True)
    email = Column(Text)
    name = Column(Text, nullable=False, default='New User')

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    tasks = relationship("TaskItem", back_populates="owner", cascade="all, delete-orphan")
