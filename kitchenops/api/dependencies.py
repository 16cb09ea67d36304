"""
Dependency injection container for FastAPI.

Provides use case instances to route handlers. Tests swap these through
app.dependency_overrides.
"""

from kitchenops.application.use_cases import (
    CreateFinishedGoodsUseCase,
    CreateInventoryItemUseCase,
    CreateOrderUseCase,
    CreateRecipeUseCase,
    DeleteFinishedGoodsUseCase,
    DeleteInventoryItemUseCase,
    DeleteOrderUseCase,
    DeleteRecipeUseCase,
    GetDashboardStatsUseCase,
    GetFinishedGoodsUseCase,
    GetInventoryItemUseCase,
    GetOrderUseCase,
    GetRecipeUseCase,
    ListFinishedGoodsUseCase,
    ListInventoryItemsUseCase,
    ListOrdersUseCase,
    ListRecipesUseCase,
    RecordFinishedGoodsTransactionUseCase,
    RecordPurchaseUseCase,
    UpdateFinishedGoodsUseCase,
    UpdateInventoryItemUseCase,
    UpdateOrderStatusUseCase,
    UpdateOrderUseCase,
    UpdateRecipeUseCase,
)


# Orders
def get_create_order_use_case() -> CreateOrderUseCase:
    return CreateOrderUseCase()


def get_update_order_use_case() -> UpdateOrderUseCase:
    return UpdateOrderUseCase()


def get_update_order_status_use_case() -> UpdateOrderStatusUseCase:
    return UpdateOrderStatusUseCase()


def get_delete_order_use_case() -> DeleteOrderUseCase:
    return DeleteOrderUseCase()


def get_get_order_use_case() -> GetOrderUseCase:
    return GetOrderUseCase()


def get_list_orders_use_case() -> ListOrdersUseCase:
    return ListOrdersUseCase()


# Inventory
def get_create_inventory_item_use_case() -> CreateInventoryItemUseCase:
    return CreateInventoryItemUseCase()


def get_update_inventory_item_use_case() -> UpdateInventoryItemUseCase:
    return UpdateInventoryItemUseCase()


def get_delete_inventory_item_use_case() -> DeleteInventoryItemUseCase:
    return DeleteInventoryItemUseCase()


def get_get_inventory_item_use_case() -> GetInventoryItemUseCase:
    return GetInventoryItemUseCase()


def get_list_inventory_items_use_case() -> ListInventoryItemsUseCase:
    return ListInventoryItemsUseCase()


def get_record_purchase_use_case() -> RecordPurchaseUseCase:
    return RecordPurchaseUseCase()


# Recipes
def get_create_recipe_use_case() -> CreateRecipeUseCase:
    return CreateRecipeUseCase()


def get_update_recipe_use_case() -> UpdateRecipeUseCase:
    return UpdateRecipeUseCase()


def get_delete_recipe_use_case() -> DeleteRecipeUseCase:
    return DeleteRecipeUseCase()


def get_get_recipe_use_case() -> GetRecipeUseCase:
    return GetRecipeUseCase()


def get_list_recipes_use_case() -> ListRecipesUseCase:
    return ListRecipesUseCase()


# Finished goods
def get_create_finished_goods_use_case() -> CreateFinishedGoodsUseCase:
    return CreateFinishedGoodsUseCase()


def get_update_finished_goods_use_case() -> UpdateFinishedGoodsUseCase:
    return UpdateFinishedGoodsUseCase()


def get_delete_finished_goods_use_case() -> DeleteFinishedGoodsUseCase:
    return DeleteFinishedGoodsUseCase()


def get_get_finished_goods_use_case() -> GetFinishedGoodsUseCase:
    return GetFinishedGoodsUseCase()


def get_list_finished_goods_use_case() -> ListFinishedGoodsUseCase:
    return ListFinishedGoodsUseCase()


def get_record_finished_goods_transaction_use_case() -> RecordFinishedGoodsTransactionUseCase:
    return RecordFinishedGoodsTransactionUseCase()


# Dashboard
def get_dashboard_stats_use_case() -> GetDashboardStatsUseCase:
    return GetDashboardStatsUseCase()
