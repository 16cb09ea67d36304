"""Dashboard Stats Use Case - read-only aggregates across all ledgers."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from kitchenops.application.dto.responses import (
    DailyOrderCount,
    DailyPurchaseTotal,
    DailySales,
    DashboardStatsResponse,
    FinishedGoodsStats,
    FinishedGoodsStock,
    InventoryStats,
    OrderStats,
    OrderSummaryResponse,
    RecipeQuantity,
    TopRecipe,
    TrendStats,
)
from kitchenops.application.use_cases.base import StoreBackedUseCase
from kitchenops.application.use_cases.views import inventory_item_to_response
from kitchenops.config import get_logger, get_settings
from kitchenops.core.entities.finished_goods import FinishedGoods
from kitchenops.core.entities.inventory import InventoryItem
from kitchenops.core.entities.order import Order, OrderStatus
from kitchenops.core.exceptions import ValidationError

logger = get_logger(__name__)

PERIODS = ("daily", "weekly", "monthly")

# Orders counted as sales in trend figures
SOLD_STATUSES = [OrderStatus.DISPATCHED.value, OrderStatus.DELIVERED.value]


def period_start(period: str, now: datetime) -> datetime:
    """Start of the reporting period: today's midnight, or 7 / 30 days back."""
    if period == "daily":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "weekly":
        return now - timedelta(days=7)
    if period == "monthly":
        return now - timedelta(days=30)
    raise ValidationError("period", f"Period must be one of: {', '.join(PERIODS)}", period)


@dataclass
class DashboardStats:
    """Raw figures gathered for the dashboard."""

    period: str
    period_start: datetime
    generated_at: datetime
    inventory_total: int
    low_stock_items: list[InventoryItem]
    daily_purchases: list[dict[str, Any]]
    orders_total: int
    orders_by_status: dict[str, int]
    orders_in_period: int
    delivered_in_period: int
    recent_orders: list[Order]
    daily_orders: list[dict[str, Any]]
    orders_by_recipe: list[dict[str, Any]]
    finished_goods_total: int
    finished_goods: list[FinishedGoods]
    daily_sales: list[dict[str, Any]]
    top_recipes: list[dict[str, Any]]


class GetDashboardStatsUseCase(StoreBackedUseCase):
    """Collect inventory, order, finished-goods and sales trend figures."""

    async def execute(self, period: str = "daily") -> DashboardStats:
        """
        Execute dashboard stats use case.

        Raises:
            ValidationError: Unknown period.
        """
        now = datetime.now(UTC)
        start = period_start(period, now)
        settings = get_settings().dashboard
        trend_start = now - timedelta(days=settings.trend_days)

        dashboard = await self._get_dashboard_store()
        inventory = await self._get_inventory_store()
        orders = await self._get_order_store()
        finished_goods = await self._get_finished_goods_store()

        recent = (await orders.list_orders())[: settings.recent_orders_limit]

        stats = DashboardStats(
            period=period,
            period_start=start,
            generated_at=now,
            inventory_total=await dashboard.count_inventory_items(),
            low_stock_items=await inventory.list_items(low_stock_only=True),
            daily_purchases=await dashboard.daily_purchase_totals(trend_start),
            orders_total=await dashboard.count_orders(),
            orders_by_status=await dashboard.order_counts_by_status(),
            orders_in_period=await dashboard.count_orders(since=start),
            delivered_in_period=await dashboard.count_orders(
                since=start, status=OrderStatus.DELIVERED.value
            ),
            recent_orders=recent,
            daily_orders=await dashboard.daily_order_counts(trend_start),
            orders_by_recipe=await dashboard.quantity_by_recipe(),
            finished_goods_total=await dashboard.count_finished_goods(),
            finished_goods=await finished_goods.list_items(),
            daily_sales=await dashboard.daily_sales(trend_start, SOLD_STATUSES),
            top_recipes=await dashboard.top_recipes(
                SOLD_STATUSES, limit=settings.top_recipes_limit
            ),
        )

        logger.info(
            "dashboard_stats_computed",
            period=period,
            orders=stats.orders_total,
            low_stock=len(stats.low_stock_items),
        )
        return stats

    def to_response(self, stats: DashboardStats) -> DashboardStatsResponse:
        """Convert result to API response."""
        return DashboardStatsResponse(
            period=stats.period,
            period_start=stats.period_start,
            generated_at=stats.generated_at,
            inventory=InventoryStats(
                total_items=stats.inventory_total,
                low_stock_count=len(stats.low_stock_items),
                low_stock_items=[inventory_item_to_response(i) for i in stats.low_stock_items],
                daily_purchases=[DailyPurchaseTotal(**row) for row in stats.daily_purchases],
            ),
            orders=OrderStats(
                total_orders=stats.orders_total,
                by_status=stats.orders_by_status,
                orders_in_period=stats.orders_in_period,
                delivered_in_period=stats.delivered_in_period,
                recent_orders=[
                    OrderSummaryResponse(
                        id=o.id,  # type: ignore[arg-type]
                        order_number=o.order_number,
                        customer_name=o.customer.name,
                        status=o.status.value,
                        order_date=o.order_date,
                        items_total=o.items_total,
                    )
                    for o in stats.recent_orders
                ],
                daily_orders=[DailyOrderCount(**row) for row in stats.daily_orders],
                by_recipe=[RecipeQuantity(**row) for row in stats.orders_by_recipe],
            ),
            finished_goods=FinishedGoodsStats(
                total_items=stats.finished_goods_total,
                stock=[
                    FinishedGoodsStock(
                        id=g.id,  # type: ignore[arg-type]
                        name=g.name,
                        unit=g.unit,
                        current_stock=g.current_stock,
                    )
                    for g in stats.finished_goods
                ],
            ),
            trends=TrendStats(
                daily_sales=[DailySales(**row) for row in stats.daily_sales],
                top_recipes=[TopRecipe(**row) for row in stats.top_recipes],
            ),
        )
