from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, ForeignKey, UniqueConstraint

from .base import Base, JSONType, utcnow


class PlanningNote(Base):
    """
    Free-text note attached to one planning module. One row per (user, module).
    """
    __tablename__ = 'planning_notes'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    module_id = Column(Text, nullable=False)

    content = Column(Text, nullable=False, default='')

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('user_id', 'module_id', name='uq_planning_notes_user_module'),
    )


class CareerMap(Base):
    """
    Career goal and skill inventory. At most one row per user.
    """
    __tablename__ = 'career_maps'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    goal = Column(Text, nullable=False)
    hard_skills = Column(Text, nullable=False)
    soft_skills = Column(Text, nullable=False)
    skill_gap = Column(Text, nullable=False)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class BusinessMap(Base):
    """
    Business readiness profile. At most one row per user.

    The risk profile arrives nested and is stored as three flat columns
    (current_activity, marital_status, emergency_fund).
    """
    __tablename__ = 'business_maps'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    personal_story = Column(Text, nullable=False)

    # Risk profile
    current_activity = Column(Text, nullable=False)
    marital_status = Column(Text, nullable=False)
    emergency_fund = Column(Text, nullable=False)

    skill = Column(Text, nullable=False)
    capital = Column(Text, nullable=False)
    time = Column(Text, nullable=False)
    knowledge = Column(Text, nullable=False)
    connections = Column(JSONType, nullable=False)
    opportunities = Column(Text, nullable=False)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class DailyDashboard(Base):
    """
    Daily plan and review. One row per (user, date string).
    """
    __tablename__ = 'daily_dashboards'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    date_string = Column(Text, nullable=False)

    big_win = Column(Text)
    schedule = Column(JSONType)
    review_achieved = Column(Boolean)
    review_best = Column(Text)
    review_lesson = Column(Text)

    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('user_id', 'date_string', name='uq_daily_dashboards_user_date'),
    )
