"""API routes for the dashboard."""

import logging
from enum import Enum

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from tracker.config import get_settings
from tracker.schemas.dashboard import (
    DashboardSummaryResponse,
    DepartmentHoursItem,
    RecentActivityItem,
    StatusCountItem,
)
from tracker.services.charts import render_hours_bar, render_status_pie
from tracker.services.dashboard import build_summary, hours_by_department, status_counts
from tracker.store import TrackerStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


# ── Enum to validate the chart name in the path ──


class ChartName(str, Enum):
    status = "status"
    hours = "hours"


# ── GET /dashboard/summary ──────────────────────────


@router.get(
    "/summary",
    response_model=DashboardSummaryResponse,
    summary="Status counts, hours per department and recent activity",
)
def get_dashboard_summary(store: TrackerStore = Depends(get_store)):
    """Recompute all aggregates from the current equipment and maintenance lists."""
    try:
        summary = build_summary(
            store.equipment,
            store.maintenance,
            get_settings().RECENT_ACTIVITY_LIMIT,
        )
        return DashboardSummaryResponse(
            total_equipment=summary["total_equipment"],
            total_records=summary["total_records"],
            status_counts=[
                StatusCountItem(name=name, value=value)
                for name, value in summary["status_counts"].items()
            ],
            hours_by_department=[
                DepartmentHoursItem(department=dept, hours=hours)
                for dept, hours in summary["hours_by_department"].items()
            ],
            recent_activities=[
                RecentActivityItem(**a) for a in summary["recent_activities"]
            ],
        )
    except Exception:
        logger.exception("Dashboard summary failed")
        raise HTTPException(status_code=500, detail="Internal server error")


# ── GET /dashboard/charts/{chart} ──────────────────


def render_chart(chart: ChartName, store: TrackerStore) -> str:
    if chart is ChartName.status:
        return render_status_pie(status_counts(store.equipment))
    return render_hours_bar(hours_by_department(store.equipment, store.maintenance))


@router.get(
    "/charts/{chart}",
    summary="Dashboard chart as SVG",
    response_class=Response,
)
def get_dashboard_chart(chart: ChartName, store: TrackerStore = Depends(get_store)):
    try:
        svg = render_chart(chart, store)
    except Exception:
        logger.exception("Rendering chart %s failed", chart.value)
        raise HTTPException(status_code=500, detail="Internal server error")
    return Response(content=svg, media_type="image/svg+xml")
