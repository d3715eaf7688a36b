#!/usr/bin/env python3
"""
Response models for API endpoints.

Rows are read with ``from_attributes`` and rendered with camelCase keys.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class CamelResponse(BaseModel):
    """Base for response bodies with camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class UserResponse(CamelResponse):
    """Stored user record."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "kq3V9xS1fXb2",
                "email": "ada@example.com",
                "name": "Ada",
                "createdAt": "2026-02-01T12:00:00Z",
                "updatedAt": "2026-02-01T12:00:00Z"
            }
        }
    )

    id: str
    email: Optional[str] = None
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SyncResponse(BaseModel):
    """Response for a user sync."""
    message: str
    user: UserResponse


class TaskResponse(CamelResponse):
    """A single task."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 7,
                "userId": "kq3V9xS1fXb2",
                "text": "Draft the business plan",
                "completed": False,
                "createdAt": "2026-02-01T12:00:00Z"
            }
        }
    )

    id: int
    user_id: str
    text: str
    completed: bool
    created_at: Optional[datetime] = None


class PlanningNoteResponse(CamelResponse):
    """A stored planning note."""
    module_id: str
    content: str
    updated_at: Optional[datetime] = None


class CareerMapResponse(CamelResponse):
    """The caller's career map."""
    goal: str
    hard_skills: str
    soft_skills: str
    skill_gap: str
    updated_at: Optional[datetime] = None


class RiskProfileResponse(BaseModel):
    activity: Optional[str] = None
    marital: Optional[str] = None
    fund: Optional[str] = None


class BusinessMapResponse(CamelResponse):
    """
    The caller's business map.

    Carries the stored flat risk columns and the nested ``riskProfile`` the
    client writes, so either shape can be read back.
    """
    personal_story: str
    current_activity: str
    marital_status: str
    emergency_fund: str
    risk_profile: Optional[RiskProfileResponse] = None
    skill: str
    capital: str
    time: str
    knowledge: str
    connections: List[Any] = Field(default_factory=list)
    opportunities: str
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "BusinessMapResponse":
        response = cls.model_validate(row)
        response.risk_profile = RiskProfileResponse(
            activity=row.current_activity,
            marital=row.marital_status,
            fund=row.emergency_fund
        )
        return response


class DailyDashboardResponse(CamelResponse):
    """The caller's dashboard for one date."""
    date_string: str
    big_win: Optional[str] = None
    schedule: Optional[List[Any]] = None
    review_achieved: Optional[bool] = None
    review_best: Optional[str] = None
    review_lesson: Optional[str] = None
    updated_at: Optional[datetime] = None
