"""
Dashboard Router - Presentation Layer

This module defines the FastAPI router serving the dashboard page, the
standalone graph and their JSON counterparts.
"""

from datetime import datetime, timezone

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from power_terminal.application.dtos.chart_dto import ChartDrawingDTO
from power_terminal.application.dtos.dashboard_dto import EnergyMetricsDTO
from power_terminal.application.dtos.error_dto import ErrorResponseDTO
from power_terminal.application.models import DashboardConfig
from power_terminal.application.use_cases.chart_use_cases import (
    BuildPowerChartUseCase,
)
from power_terminal.application.use_cases.dashboard_use_cases import (
    GetDashboardDataUseCase,
)
from power_terminal.domain.entities.errors import HomeAssistantError
from power_terminal.presentation.views import (
    render_chart_svg,
    render_dashboard_page,
    render_error_page,
)
from power_terminal.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Dashboard"])

SVG_MEDIA_TYPE = "image/svg+xml"


def _error_response(exc: HomeAssistantError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ErrorResponseDTO.from_domain(exc).model_dump(mode="json"),
    )


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse, include_in_schema=False)
@inject
async def dashboard(
    get_dashboard_data_use_case: GetDashboardDataUseCase = Depends(
        Provide["get_dashboard_data_use_case"]
    ),
    build_power_chart_use_case: BuildPowerChartUseCase = Depends(
        Provide["build_power_chart_use_case"]
    ),
    dashboard_config: DashboardConfig = Depends(Provide["dashboard_config"]),
) -> HTMLResponse:
    """
    Render the full dashboard: metrics bar and 24-hour power graph.

    Backend failures render the error page with status 503 instead.
    """
    now = datetime.now(timezone.utc)
    try:
        data = await get_dashboard_data_use_case.execute(now)
    except HomeAssistantError as exc:
        logger.warning(
            "dashboard.render.backend_error",
            category=exc.category.value,
            error=exc.message,
        )
        return HTMLResponse(
            render_error_page(exc, dashboard_config, now),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    drawing = build_power_chart_use_case.execute(data.history, now)
    logger.debug("dashboard.rendered", polylines=len(drawing.polylines))
    return HTMLResponse(render_dashboard_page(data.metrics, drawing, dashboard_config))


@router.get("/graph.svg", response_class=Response)
@inject
async def graph_svg(
    get_dashboard_data_use_case: GetDashboardDataUseCase = Depends(
        Provide["get_dashboard_data_use_case"]
    ),
    build_power_chart_use_case: BuildPowerChartUseCase = Depends(
        Provide["build_power_chart_use_case"]
    ),
) -> Response:
    """Return the power graph alone as an SVG image."""
    now = datetime.now(timezone.utc)
    try:
        history = await get_dashboard_data_use_case.fetch_history(now)
    except HomeAssistantError as exc:
        logger.warning("graph.backend_error", category=exc.category.value)
        return _error_response(exc)

    drawing = build_power_chart_use_case.execute(history, now)
    return Response(content=render_chart_svg(drawing), media_type=SVG_MEDIA_TYPE)


@router.get(
    "/api/chart",
    response_model=ChartDrawingDTO,
    responses={503: {"model": ErrorResponseDTO}},
)
@inject
async def chart(
    get_dashboard_data_use_case: GetDashboardDataUseCase = Depends(
        Provide["get_dashboard_data_use_case"]
    ),
    build_power_chart_use_case: BuildPowerChartUseCase = Depends(
        Provide["build_power_chart_use_case"]
    ),
):
    """Return the chart drawing descriptor as JSON."""
    now = datetime.now(timezone.utc)
    try:
        history = await get_dashboard_data_use_case.fetch_history(now)
    except HomeAssistantError as exc:
        logger.warning("chart.backend_error", category=exc.category.value)
        return _error_response(exc)

    return ChartDrawingDTO.from_domain(build_power_chart_use_case.execute(history, now))


@router.get(
    "/api/metrics",
    response_model=EnergyMetricsDTO,
    responses={503: {"model": ErrorResponseDTO}},
)
@inject
async def metrics(
    get_dashboard_data_use_case: GetDashboardDataUseCase = Depends(
        Provide["get_dashboard_data_use_case"]
    ),
):
    """Return the current energy readings as JSON."""
    try:
        current = await get_dashboard_data_use_case.fetch_metrics(
            datetime.now(timezone.utc)
        )
    except HomeAssistantError as exc:
        logger.warning("metrics.backend_error", category=exc.category.value)
        return _error_response(exc)

    return EnergyMetricsDTO.from_domain(current)
