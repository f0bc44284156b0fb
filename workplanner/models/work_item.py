"""Work item data model for workplanner."""

from enum import Enum
from pydantic import Field

from workplanner.models.base import CamelModel
from workplanner.models.constants import MINUTES_PER_DAY


class WorkItemType(str, Enum):
    """Kind of schoolwork."""
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    TEST = "test"
    DISCUSSION = "discussion"
    LAB = "lab"
    PROJECT = "project"
    READING = "reading"
    PRESENTATION = "presentation"
    OTHER = "other"


class WorkItemInput(CamelModel):
    """One unit of schoolwork to plan around."""

    id: str = Field(..., description="Caller-assigned unique identifier")
    title: str = Field(..., description="Work item title")
    type: WorkItemType = Field(..., description="Work item type")
    due_at: str = Field(..., description="Due timestamp (ISO-8601), echoed unchanged into the plan")
    estimated_minutes: int = Field(..., gt=0, le=MINUTES_PER_DAY, description="Estimated effort in minutes")
    complexity_score: float = Field(..., ge=0, le=100, description="Complexity score")
    risk_score: float = Field(..., ge=0, le=100, description="Risk of missing or underperforming")
    priority_score: float = Field(..., ge=0, le=100, description="Caller-assigned priority")
    grade_weight: float = Field(..., ge=0, le=100, description="Share of the course grade")
