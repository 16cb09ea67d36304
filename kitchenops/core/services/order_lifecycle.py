"""
Order lifecycle engine.

Owns the order status state machine and the stock side effects attached to
specific transitions:

- Draft -> Ingredients Allocated deducts the aggregated raw materials
- Ingredients Allocated -> Cancelled restores them
- entering Ready for Dispatch produces finished goods
- entering Delivered consumes finished goods

Stock changes go through the stores' conditional adjust, one item at a time.
When a deduction loses a race part way through an allocation, the deductions
already applied are reversed before the error is raised.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from kitchenops.config import get_logger, get_settings
from kitchenops.core.entities.actor import Actor
from kitchenops.core.entities.event import DomainEvent, EventType
from kitchenops.core.entities.finished_goods import StockHistoryEntry, TransactionType
from kitchenops.core.entities.inventory import InventoryItem
from kitchenops.core.entities.order import (
    ALLOWED_TRANSITIONS,
    Customer,
    IngredientRequirement,
    Order,
    OrderItem,
    OrderStatus,
    StatusHistoryEntry,
    generate_order_number,
)
from kitchenops.core.entities.recipe import Recipe
from kitchenops.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    InvalidStateError,
    InvalidStatusError,
    InventoryItemNotFoundError,
    OrderNotFoundError,
    RecipeNotFoundError,
    ValidationError,
)
from kitchenops.core.interfaces.event_publisher import IEventPublisher
from kitchenops.core.interfaces.finished_goods_store import IFinishedGoodsStore
from kitchenops.core.interfaces.inventory_store import IInventoryStore
from kitchenops.core.interfaces.order_store import IOrderStore
from kitchenops.core.interfaces.recipe_store import IRecipeStore
from kitchenops.core.services.ingredient_aggregator import IngredientAggregator

logger = get_logger(__name__)

# Sentinel for optional fields where None means "clear"
UNSET: Any = object()


@dataclass
class FulfillmentWarning:
    """A delivered line whose finished-goods stock could not cover it."""

    recipe_id: int
    finished_goods_id: int
    name: str
    required: float
    available: float

    @property
    def message(self) -> str:
        return (
            f"Insufficient finished goods stock for {self.name}. "
            f"Required: {self.required:g}, Available: {self.available:g}"
        )


@dataclass
class StatusUpdateResult:
    """Outcome of a status change."""

    order: Order
    previous_status: OrderStatus
    warnings: list[FulfillmentWarning] = field(default_factory=list)


class OrderLifecycleService:
    """Create orders and drive them through their status lifecycle."""

    def __init__(
        self,
        order_store: IOrderStore,
        recipe_store: IRecipeStore,
        inventory_store: IInventoryStore,
        finished_goods_store: IFinishedGoodsStore,
        publisher: IEventPublisher | None = None,
        aggregator: IngredientAggregator | None = None,
        enforce_transitions: bool | None = None,
        order_number_prefix: str | None = None,
    ):
        self._orders = order_store
        self._recipes = recipe_store
        self._inventory = inventory_store
        self._finished_goods = finished_goods_store
        self._publisher = publisher
        self._aggregator = aggregator or IngredientAggregator(recipe_store)

        settings = get_settings().orders
        self._enforce = (
            settings.enforce_transitions
            if enforce_transitions is None
            else enforce_transitions
        )
        self._prefix = order_number_prefix or settings.order_number_prefix

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_order(self, order_id: int) -> Order:
        order = await self._orders.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def list_orders(
        self,
        status: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[Order]:
        """List orders newest first, filtered by status and order date."""
        parsed = self._parse_status(status) if status else None
        return await self._orders.list_orders(
            status=parsed, start_date=start_date, end_date=end_date
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_order(
        self,
        customer: Customer,
        items: list[OrderItem],
        actor: Actor,
        delivery_date: datetime | None = None,
        notes: str | None = None,
    ) -> Order:
        """
        Create a Draft order after checking raw-material availability.

        Nothing is persisted if any ingredient is missing or short.

        Raises:
            ValidationError: Missing customer details or no items.
            InvalidQuantityError: A line quantity below 1.
            RecipeNotFoundError: A line references an unknown recipe.
            InventoryItemNotFoundError: A recipe references an unknown item.
            InsufficientStockError: Demand exceeds current stock.
        """
        self._validate_customer(customer)
        self._validate_items(items)

        total_ingredients = await self._aggregator.compute_total_ingredients(items)
        await self._check_availability(total_ingredients)
        priced_items = await self._price_items(items)

        order = Order(
            order_number=generate_order_number(self._prefix),
            customer=customer,
            items=priced_items,
            total_ingredients=total_ingredients,
            status=OrderStatus.DRAFT,
            status_history=[
                StatusHistoryEntry(status=OrderStatus.DRAFT, updated_by=actor.user_id)
            ],
            delivery_date=delivery_date,
            notes=notes,
            created_by=actor.user_id,
        )
        order = await self._orders.create_order(order)

        logger.info(
            "order_created",
            order_id=order.id,
            order_number=order.order_number,
            lines=len(order.items),
            ingredients=len(order.total_ingredients),
        )
        await self._publish(
            EventType.ORDER_UPDATE,
            action="created",
            order_id=order.id,
            order_number=order.order_number,
            status=order.status.value,
        )
        return order

    async def update_order(
        self,
        order_id: int,
        actor: Actor,
        customer: Customer | None = None,
        items: list[OrderItem] | None = None,
        delivery_date: datetime | None = UNSET,
        notes: str | None = UNSET,
    ) -> Order:
        """
        Edit a Draft order.

        Changed items are re-aggregated and re-priced. Stock is not checked
        again; allocation validates it.
        """
        order = await self.get_order(order_id)
        if not order.is_editable:
            raise InvalidStateError(
                "Only orders in Draft status can be updated",
                current_status=order.status.value,
            )

        if customer is not None:
            self._validate_customer(customer)
            order.customer = customer
        if delivery_date is not UNSET:
            order.delivery_date = delivery_date
        if notes is not UNSET:
            order.notes = notes
        if items is not None:
            self._validate_items(items)
            order.total_ingredients = (
                await self._aggregator.compute_total_ingredients(items)
            )
            order.items = await self._price_items(items)
            order.items_total = sum(i.line_total for i in order.items)

        order.updated_at = datetime.now(UTC)
        order = await self._orders.update_order(order)

        logger.info(
            "order_updated",
            order_id=order.id,
            items_changed=items is not None,
            updated_by=actor.user_id,
        )
        await self._publish(
            EventType.ORDER_UPDATE,
            action="updated",
            order_id=order.id,
            order_number=order.order_number,
            status=order.status.value,
        )
        return order

    async def delete_order(self, order_id: int) -> None:
        """Delete a Draft or Cancelled order."""
        order = await self.get_order(order_id)
        if not order.is_deletable:
            raise InvalidStateError(
                "Only Draft or Cancelled orders can be deleted",
                current_status=order.status.value,
            )
        await self._orders.delete_order(order_id)

        logger.info("order_deleted", order_id=order_id, order_number=order.order_number)
        await self._publish(
            EventType.ORDER_UPDATE,
            action="deleted",
            order_id=order_id,
            order_number=order.order_number,
        )

    async def update_order_status(
        self,
        order_id: int,
        new_status: str | OrderStatus,
        actor: Actor,
        notes: str | None = None,
    ) -> StatusUpdateResult:
        """
        Move an order to a new status and apply the stock side effects.

        Raises:
            InvalidStatusError: new_status is not a recognized status.
            OrderNotFoundError: No such order.
            InvalidStateError: Transition not allowed (enforcement on), or another
                request changed the status first.
            InventoryItemNotFoundError: Allocation references a missing item.
            InsufficientStockError: Allocation demand exceeds stock.
        """
        target = self._parse_status(new_status)
        order = await self.get_order(order_id)
        current = order.status

        if self._enforce and target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidStateError(
                f"Cannot change order status from {current.value} to {target.value}",
                current_status=current.value,
            )

        # Claim the move first so concurrent requests cannot both apply its effects.
        if not await self._orders.claim_status(order.id, current, target):  # type: ignore[arg-type]
            raise InvalidStateError(
                f"Order status changed while moving from {current.value} to {target.value}",
                current_status=current.value,
            )

        try:
            warnings = await self._apply_effects(order, current, target, actor)
        except Exception:
            await self._orders.claim_status(order.id, target, current)  # type: ignore[arg-type]
            raise

        entry = StatusHistoryEntry(status=target, updated_by=actor.user_id, notes=notes)
        await self._orders.append_status(order.id, entry)  # type: ignore[arg-type]
        order.status_history.append(entry)
        order.status = target
        order.updated_at = entry.timestamp

        logger.info(
            "order_status_updated",
            order_id=order.id,
            from_status=current.value,
            to_status=target.value,
            warnings=len(warnings),
        )
        await self._publish(
            EventType.ORDER_UPDATE,
            action="status_changed",
            order_id=order.id,
            order_number=order.order_number,
            previous_status=current.value,
            status=target.value,
        )
        return StatusUpdateResult(order=order, previous_status=current, warnings=warnings)

    async def _apply_effects(
        self,
        order: Order,
        current: OrderStatus,
        target: OrderStatus,
        actor: Actor,
    ) -> list[FulfillmentWarning]:
        if current == OrderStatus.DRAFT and target == OrderStatus.INGREDIENTS_ALLOCATED:
            await self._allocate(order, actor)
        elif (
            current == OrderStatus.INGREDIENTS_ALLOCATED
            and target == OrderStatus.CANCELLED
        ):
            await self._release(order, actor)

        if target == OrderStatus.READY_FOR_DISPATCH and current != target:
            await self._produce(order, actor)
        if target == OrderStatus.DELIVERED and current != target:
            return await self._consume(order, actor)
        return []

    # ------------------------------------------------------------------
    # Stock effects
    # ------------------------------------------------------------------

    async def _check_availability(
        self, requirements: list[IngredientRequirement]
    ) -> list[tuple[IngredientRequirement, InventoryItem]]:
        """Check every requirement against stock before anything is written."""
        checked: list[tuple[IngredientRequirement, InventoryItem]] = []
        for req in requirements:
            item = await self._inventory.get_item(req.inventory_item_id)
            if item is None:
                raise InventoryItemNotFoundError(req.inventory_item_id)
            if item.current_stock < req.quantity:
                raise InsufficientStockError(
                    item_name=item.name,
                    required=req.quantity,
                    available=item.current_stock,
                    unit=req.unit,
                )
            checked.append((req, item))
        return checked

    async def _allocate(self, order: Order, actor: Actor) -> None:
        checked = await self._check_availability(order.total_ingredients)

        applied: list[IngredientRequirement] = []
        for req, item in checked:
            ok = await self._inventory.adjust_stock(
                req.inventory_item_id, -req.quantity, actor.user_id
            )
            if not ok:
                await self._compensate(order, applied, actor)
                latest = await self._inventory.get_item(req.inventory_item_id)
                raise InsufficientStockError(
                    item_name=item.name,
                    required=req.quantity,
                    available=latest.current_stock if latest else 0.0,
                    unit=req.unit,
                )
            applied.append(req)

        logger.info(
            "ingredients_allocated",
            order_id=order.id,
            items=len(applied),
        )
        await self._after_inventory_change(order, applied, action="allocated")

    async def _compensate(
        self,
        order: Order,
        applied: list[IngredientRequirement],
        actor: Actor,
    ) -> None:
        for req in reversed(applied):
            await self._inventory.adjust_stock(
                req.inventory_item_id, req.quantity, actor.user_id
            )
        logger.warning(
            "allocation_compensated",
            order_id=order.id,
            restored=len(applied),
        )

    async def _release(self, order: Order, actor: Actor) -> None:
        restored: list[IngredientRequirement] = []
        for req in order.total_ingredients:
            ok = await self._inventory.adjust_stock(
                req.inventory_item_id, req.quantity, actor.user_id
            )
            if ok:
                restored.append(req)
            else:
                logger.warning(
                    "release_item_missing",
                    order_id=order.id,
                    item_id=req.inventory_item_id,
                )

        logger.info("ingredients_released", order_id=order.id, items=len(restored))
        await self._after_inventory_change(order, restored, action="released")

    async def _after_inventory_change(
        self,
        order: Order,
        requirements: list[IngredientRequirement],
        action: str,
    ) -> None:
        if not requirements:
            return
        await self._publish(
            EventType.INVENTORY_UPDATE,
            action=action,
            order_id=order.id,
            item_ids=[r.inventory_item_id for r in requirements],
        )
        for req in requirements:
            item = await self._inventory.get_item(req.inventory_item_id)
            if item is not None and item.is_low_stock:
                await self._publish(
                    EventType.LOW_STOCK_ALERT,
                    item_id=item.id,
                    name=item.name,
                    current_stock=item.current_stock,
                    threshold_value=item.threshold_value,
                    unit=item.unit.value,
                )

    async def _produce(self, order: Order, actor: Actor) -> None:
        produced: list[int] = []
        for line in order.items:
            goods = await self._finished_goods.get_item_by_recipe(line.recipe_id)
            if goods is None:
                continue
            entry = StockHistoryEntry(
                finished_goods_id=goods.id,
                transaction_type=TransactionType.PRODUCED,
                quantity=line.quantity,
                order_id=order.id,
                notes=f"Produced for order {order.order_number}",
                updated_by=actor.user_id,
            )
            await self._finished_goods.apply_transaction(entry, line.quantity)
            produced.append(goods.id)  # type: ignore[arg-type]

        if produced:
            logger.info("finished_goods_produced", order_id=order.id, items=len(produced))
            await self._publish(
                EventType.FINISHED_GOODS_UPDATE,
                action="produced",
                order_id=order.id,
                finished_goods_ids=produced,
            )

    async def _consume(self, order: Order, actor: Actor) -> list[FulfillmentWarning]:
        sold: list[int] = []
        warnings: list[FulfillmentWarning] = []
        for line in order.items:
            goods = await self._finished_goods.get_item_by_recipe(line.recipe_id)
            if goods is None:
                continue

            applied = False
            if goods.current_stock >= line.quantity:
                entry = StockHistoryEntry(
                    finished_goods_id=goods.id,
                    transaction_type=TransactionType.SOLD,
                    quantity=-line.quantity,
                    order_id=order.id,
                    notes=f"Sold via order {order.order_number}",
                    updated_by=actor.user_id,
                )
                applied = await self._finished_goods.apply_transaction(
                    entry, -line.quantity
                )

            if applied:
                sold.append(goods.id)  # type: ignore[arg-type]
                continue

            latest = await self._finished_goods.get_item(goods.id)  # type: ignore[arg-type]
            warning = FulfillmentWarning(
                recipe_id=line.recipe_id,
                finished_goods_id=goods.id,  # type: ignore[arg-type]
                name=goods.name,
                required=line.quantity,
                available=latest.current_stock if latest else 0.0,
            )
            warnings.append(warning)
            logger.warning(
                "finished_goods_short_on_delivery",
                order_id=order.id,
                finished_goods_id=goods.id,
                required=warning.required,
                available=warning.available,
            )

        if sold:
            logger.info("finished_goods_sold", order_id=order.id, items=len(sold))
            await self._publish(
                EventType.FINISHED_GOODS_UPDATE,
                action="sold",
                order_id=order.id,
                finished_goods_ids=sold,
            )
        return warnings

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_status(value: str | OrderStatus) -> OrderStatus:
        status = OrderStatus.parse(value)
        if status is None:
            raise InvalidStatusError(value, [s.value for s in OrderStatus])
        return status

    @staticmethod
    def _validate_customer(customer: Customer) -> None:
        if not customer.name:
            raise ValidationError("customer.name", "Customer name is required")
        if not customer.phone_number:
            raise ValidationError(
                "customer.phone_number", "Customer phone number is required"
            )

    @staticmethod
    def _validate_items(items: list[OrderItem]) -> None:
        if not items:
            raise ValidationError("items", "Order must have at least one item")
        for index, line in enumerate(items):
            if line.quantity < 1:
                raise InvalidQuantityError(
                    f"items[{index}].quantity",
                    "Quantity must be at least 1",
                    line.quantity,
                )

    async def _price_items(self, items: list[OrderItem]) -> list[OrderItem]:
        """Copy name and unit price from each line's recipe."""
        recipes: dict[int, Recipe] = {}
        priced: list[OrderItem] = []
        for line in items:
            recipe = recipes.get(line.recipe_id)
            if recipe is None:
                recipe = await self._recipes.get_recipe(line.recipe_id)
                if recipe is None:
                    raise RecipeNotFoundError(line.recipe_id)
                recipes[line.recipe_id] = recipe
            priced.append(
                OrderItem(
                    recipe_id=line.recipe_id,
                    recipe_name=recipe.name,
                    quantity=line.quantity,
                    unit_price=recipe.unit_price,
                )
            )
        return priced

    async def _publish(self, event_type: EventType, **data: Any) -> None:
        if self._publisher is None:
            return
        await self._publisher.publish(DomainEvent(type=event_type, data=data))
