"""Pytest fixtures and configuration for workplanner tests."""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from workplanner.models.plan_request import WorkPlanOptimizeRequest
from workplanner.models.work_item import WorkItemInput, WorkItemType


@pytest.fixture
def now():
    """Fixed planning instant: Monday 2026-03-02 09:00 UTC."""
    return datetime(2026, 3, 2, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def work_item_base(now):
    """Base work item data for creating test items.

    Returns a dict with default attributes that can be overridden.
    """
    return {
        "id": "item-1",
        "title": "Essay draft",
        "type": WorkItemType.ASSIGNMENT,
        "due_at": (now + timedelta(days=5)).isoformat(),
        "estimated_minutes": 120,
        "complexity_score": 50,
        "risk_score": 50,
        "priority_score": 50,
        "grade_weight": 50,
    }


@pytest.fixture
def make_item(work_item_base, now):
    """Factory for WorkItemInput; `due_in_days` is relative to `now`."""
    def _make(due_in_days=None, **overrides):
        data = {**work_item_base, **overrides}
        if due_in_days is not None:
            data["due_at"] = (now + timedelta(days=due_in_days)).isoformat()
        return WorkItemInput(**data)
    return _make


@pytest.fixture
def make_request():
    """Factory for WorkPlanOptimizeRequest with optional section overrides."""
    def _make(work_items=None, **sections):
        return WorkPlanOptimizeRequest(work_items=work_items or [], **sections)
    return _make


@pytest.fixture
def sample_item(make_item):
    """Scenario A item: 120-minute assignment due in five days, all scores 50."""
    return make_item()


@pytest.fixture
def test_client(now):
    """FastAPI test client with the planning clock pinned to `now`."""
    from workplanner.api.app import app
    from workplanner.api.dependencies import get_now

    app.dependency_overrides[get_now] = lambda: now

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
