from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class TaskItem(Base):
    """
    A to-do entry. Listed per owner in creation order.
    """
    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    # Relationships
    owner = relationship("User", back_populates="tasks")

    __table_args__ = (
        Index('idx_tasks_user_created', 'user_id', 'created_at'),
    )
