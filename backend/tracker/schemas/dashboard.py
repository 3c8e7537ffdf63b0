"""Pydantic schemas for the dashboard endpoints."""

from pydantic import BaseModel, Field


# ── Auxiliary models ────────────────────────────────


class StatusCountItem(BaseModel):
    """Pie chart slice: equipment count for one status."""
    name: str
    value: int


class DepartmentHoursItem(BaseModel):
    """Bar chart bar: total maintenance hours for one department."""
    department: str
    hours: float


class RecentActivityItem(BaseModel):
    """A recently added maintenance record, formatted for display."""
    id: str
    equipment_name: str
    date: str = Field(description="M/D/YYYY")
    description: str


# ── Response: Summary ───────────────────────────────


class DashboardSummaryResponse(BaseModel):
    """Response for GET /dashboard/summary."""
    total_equipment: int
    total_records: int
    status_counts: list[StatusCountItem]
    hours_by_department: list[DepartmentHoursItem]
    recent_activities: list[RecentActivityItem]
