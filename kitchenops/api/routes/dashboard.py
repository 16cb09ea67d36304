"""Dashboard endpoints."""

from fastapi import APIRouter, Depends

from kitchenops.api.dependencies import get_dashboard_stats_use_case
from kitchenops.api.security import CurrentActor
from kitchenops.application.dto.responses import DashboardStatsResponse, ErrorResponse
from kitchenops.application.use_cases import GetDashboardStatsUseCase

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_stats(
    actor: CurrentActor,
    period: str = "daily",
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
) -> DashboardStatsResponse:
    """Aggregate stats for period=daily|weekly|monthly."""
    stats = await use_case.execute(period)
    return use_case.to_response(stats)
