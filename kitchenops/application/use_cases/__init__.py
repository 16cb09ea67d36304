"""Application use cases."""

from kitchenops.application.use_cases.create_order import CreateOrderUseCase, OrderResult
from kitchenops.application.use_cases.get_dashboard_stats import (
    DashboardStats,
    GetDashboardStatsUseCase,
)
from kitchenops.application.use_cases.manage_finished_goods import (
    CreateFinishedGoodsUseCase,
    DeleteFinishedGoodsUseCase,
    FinishedGoodsResult,
    GetFinishedGoodsUseCase,
    ListFinishedGoodsUseCase,
    UpdateFinishedGoodsUseCase,
)
from kitchenops.application.use_cases.manage_inventory import (
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    GetInventoryItemUseCase,
    ListInventoryItemsUseCase,
    UpdateInventoryItemUseCase,
)
from kitchenops.application.use_cases.manage_recipes import (
    CreateRecipeUseCase,
    DeleteRecipeUseCase,
    GetRecipeUseCase,
    ListRecipesUseCase,
    RecipeResult,
    UpdateRecipeUseCase,
)
from kitchenops.application.use_cases.query_orders import (
    DeleteOrderUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
)
from kitchenops.application.use_cases.record_finished_goods_transaction import (
    RecordFinishedGoodsTransactionUseCase,
)
from kitchenops.application.use_cases.record_purchase import RecordPurchaseUseCase
from kitchenops.application.use_cases.update_order import UpdateOrderUseCase
from kitchenops.application.use_cases.update_order_status import (
    OrderStatusResult,
    UpdateOrderStatusUseCase,
)

__all__ = [
    # Orders
    "CreateOrderUseCase",
    "UpdateOrderUseCase",
    "UpdateOrderStatusUseCase",
    "DeleteOrderUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "OrderResult",
    "OrderStatusResult",
    # Inventory
    "CreateInventoryItemUseCase",
    "UpdateInventoryItemUseCase",
    "DeleteInventoryItemUseCase",
    "GetInventoryItemUseCase",
    "ListInventoryItemsUseCase",
    "RecordPurchaseUseCase",
    # Recipes
    "CreateRecipeUseCase",
    "UpdateRecipeUseCase",
    "DeleteRecipeUseCase",
    "GetRecipeUseCase",
    "ListRecipesUseCase",
    "RecipeResult",
    # Finished goods
    "CreateFinishedGoodsUseCase",
    "UpdateFinishedGoodsUseCase",
    "DeleteFinishedGoodsUseCase",
    "GetFinishedGoodsUseCase",
    "ListFinishedGoodsUseCase",
    "RecordFinishedGoodsTransactionUseCase",
    "FinishedGoodsResult",
    # Dashboard
    "GetDashboardStatsUseCase",
    "DashboardStats",
]
