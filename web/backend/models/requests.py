#!/usr/bin/env python3
"""
Request models for API endpoints.

One schema per resource kind. Bodies use camelCase keys on the wire;
fields are snake_case in Python. Validation runs before any storage access.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class CamelRequest(BaseModel):
    """Base for request bodies with camelCase aliases."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _require_text(value: Optional[str], info: ValidationInfo) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{to_camel(info.field_name)} must not be empty")
    return value


class SyncRequest(CamelRequest):
    """Profile data sent by the client after sign-in."""
    email: Optional[str] = Field(None, description="Email address; falls back to the token's email claim")
    name: Optional[str] = Field(None, description="Display name; falls back to the token's name claim")


class TaskCreate(CamelRequest):
    """Request to create a task."""
    text: str = Field(..., description="Task text (must not be empty)")

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text must not be empty")
        return value


class TaskUpdate(CamelRequest):
    """Partial update of a task; only the fields sent are changed."""
    text: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise ValueError("Text must not be empty")
        return value

    @field_validator("completed")
    @classmethod
    def completed_not_null(cls, value: Optional[bool]) -> bool:
        if value is None:
            raise ValueError("completed must be true or false")
        return value

    @model_validator(mode="after")
    def has_changes(self) -> "TaskUpdate":
        if not self.model_fields_set:
            raise ValueError("Nothing to update: provide text or completed")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class PlanningNoteUpsert(CamelRequest):
    """Create or replace the note for one planning module."""
    module_id: str = Field(..., description="Planning module identifier, e.g. '1.1'")
    content: str = Field(..., description="Note text (may be empty)")

    @field_validator("module_id")
    @classmethod
    def module_id_not_empty(cls, value: str, info: ValidationInfo) -> str:
        return _require_text(value, info)


class CareerMapUpsert(CamelRequest):
    """Create or replace the caller's career map. Every field must be present."""
    goal: str
    hard_skills: str
    soft_skills: str
    skill_gap: str

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump()


class RiskProfile(BaseModel):
    """Nested risk profile of a business map."""
    activity: str
    marital: str
    fund: str

    @field_validator("activity", "marital", "fund")
    @classmethod
    def not_empty(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"riskProfile.{info.field_name} must not be empty")
        return value


class BusinessMapUpsert(CamelRequest):
    """Create or replace the caller's business map. Every field must be present."""
    personal_story: str
    risk_profile: RiskProfile
    skill: str
    capital: str
    time: str
    knowledge: str
    connections: List[Any]
    opportunities: str

    @field_validator("personal_story", "skill", "capital", "time", "knowledge", "opportunities")
    @classmethod
    def not_empty(cls, value: str, info: ValidationInfo) -> str:
        return _require_text(value, info)

    def to_storage(self) -> Dict[str, Any]:
        """Flatten the risk profile into its stored columns."""
        return {
            "personal_story": self.personal_story,
            "current_activity": self.risk_profile.activity,
            "marital_status": self.risk_profile.marital,
            "emergency_fund": self.risk_profile.fund,
            "skill": self.skill,
            "capital": self.capital,
            "time": self.time,
            "knowledge": self.knowledge,
            "connections": self.connections,
            "opportunities": self.opportunities,
        }


class DailyDashboardUpsert(CamelRequest):
    """Create or replace the dashboard for one date. Only the date is required."""
    date_string: str = Field(..., description="Client-formatted date, the natural key")
    big_win: Optional[str] = None
    schedule: Optional[List[Any]] = None
    review_achieved: Optional[bool] = None
    review_best: Optional[str] = None
    review_lesson: Optional[str] = None

    @field_validator("date_string")
    @classmethod
    def date_not_empty(cls, value: str, info: ValidationInfo) -> str:
        return _require_text(value, info)

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"date_string"})
