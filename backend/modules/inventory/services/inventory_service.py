# backend/modules/inventory/services/inventory_service.py

from typing import Dict, List, Optional
import logging

from sqlalchemy.orm import Session, joinedload

from core.crud import CRUDRepository
from core.exports import to_csv
from ..models.inventory_models import (
    Ingredient, InventoryTransaction, StockStatus, TransactionType
)
from ..schemas.inventory_schemas import (
    IngredientCreate, IngredientUpdate, StockAdjustment,
    StockAnalytics, StockStatusCounts,
)

logger = logging.getLogger(__name__)

RECENT_TRANSACTION_LIMIT = 20

INVENTORY_EXPORT_HEADERS = [
    "Name", "Category", "Stock Quantity", "Unit", "Reorder Level", "Cost",
    "Supplier", "Type", "Origin", "Allergens", "Dietary Info", "Last Updated",
]

TRANSACTION_EXPORT_HEADERS = [
    "Date", "Ingredient", "Transaction Type", "Quantity", "Previous Quantity",
    "New Quantity", "Unit", "Notes",
]


def _format_quantity(value: Optional[float]) -> str:
    if value is None:
        return "0"
    return f"{value:g}"


class InventoryService:
    """Stock levels and the transaction history behind them"""

    def __init__(self, db: Session):
        self.db = db
        self.ingredients = CRUDRepository(Ingredient, db, label="Ingredient")
        self.transactions = CRUDRepository(InventoryTransaction, db, label="Inventory transaction")

    def list_ingredients(self, category: Optional[str] = None) -> List[Ingredient]:
        return self.ingredients.list(filters={"category": category}, order_by="name")

    def get_ingredient(self, ingredient_id: int) -> Ingredient:
        return self.ingredients.get_or_404(ingredient_id)

    def create_ingredient(self, ingredient_data: IngredientCreate) -> Ingredient:
        """Create an ingredient, recording its opening stock"""
        ingredient = self.ingredients.create(ingredient_data.model_dump(), commit=False)
        if ingredient.stock_quantity and ingredient.stock_quantity > 0:
            self._record(
                ingredient,
                TransactionType.INITIAL,
                quantity=ingredient.stock_quantity,
                previous=0,
                notes="Initial inventory setup",
            )
        self.db.commit()
        self.db.refresh(ingredient)
        return ingredient

    def update_ingredient(self, ingredient_id: int, ingredient_data: IngredientUpdate) -> Ingredient:
        """Update an ingredient; a changed stock level is recorded as an adjustment"""
        ingredient = self.ingredients.get_or_404(ingredient_id)
        previous = ingredient.stock_quantity or 0
        update_data = ingredient_data.model_dump(exclude_unset=True)

        ingredient = self.ingredients.update(ingredient_id, update_data, commit=False)
        new_quantity = update_data.get("stock_quantity")
        if new_quantity is not None and new_quantity != previous:
            self._record(
                ingredient,
                TransactionType.ADJUSTMENT,
                quantity=new_quantity - previous,
                previous=previous,
                notes="Manual stock adjustment",
            )
        self.db.commit()
        self.db.refresh(ingredient)
        return ingredient

    def delete_ingredient(self, ingredient_id: int) -> None:
        self.ingredients.delete(ingredient_id)

    def adjust_stock(self, ingredient_id: int, adjustment: StockAdjustment) -> Ingredient:
        """
        Apply a manual adjustment or record waste.

        Stock never goes below zero. Waste is stored as a negative quantity.
        """
        ingredient = self.ingredients.get_or_404(ingredient_id)
        current = ingredient.stock_quantity or 0

        if adjustment.type == "waste":
            change = -abs(adjustment.quantity)
            transaction_type = TransactionType.WASTE
        else:
            change = adjustment.quantity
            transaction_type = TransactionType.ADJUSTMENT

        final_quantity = max(0, current + change)
        ingredient.stock_quantity = final_quantity
        self._record(
            ingredient,
            transaction_type,
            quantity=change,
            previous=current,
            notes=adjustment.notes or f"Manual {adjustment.type}",
        )
        self.db.commit()
        self.db.refresh(ingredient)
        logger.info(
            f"Stock {adjustment.type} for {ingredient.name}: {current} -> {final_quantity} {ingredient.unit}"
        )
        return ingredient

    def record_purchase(self, ingredient_id: int, quantity: float, notes: str) -> Ingredient:
        """Add purchased stock; the caller commits"""
        ingredient = self.ingredients.get_or_404(ingredient_id)
        current = ingredient.stock_quantity or 0
        ingredient.stock_quantity = current + quantity
        self._record(
            ingredient,
            TransactionType.PURCHASE,
            quantity=quantity,
            previous=current,
            notes=notes,
        )
        return ingredient

    def get_stock_history(self, ingredient_id: int) -> List[InventoryTransaction]:
        self.ingredients.get_or_404(ingredient_id)
        return self.transactions.query({"ingredient_id": ingredient_id}).order_by(
            InventoryTransaction.created_at.desc(), InventoryTransaction.id.desc()
        ).all()

    def list_transactions(self, limit: Optional[int] = None) -> List[InventoryTransaction]:
        query = self.db.query(InventoryTransaction).options(
            joinedload(InventoryTransaction.ingredient)
        ).order_by(InventoryTransaction.created_at.desc(), InventoryTransaction.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_stock_analytics(self) -> StockAnalytics:
        ingredients = self.db.query(Ingredient).all()

        category_counts: Dict[str, int] = {}
        status_counts = StockStatusCounts()
        for ingredient in ingredients:
            category = ingredient.category or "Uncategorized"
            category_counts[category] = category_counts.get(category, 0) + 1

            status = ingredient.stock_status
            if status == StockStatus.OUT_OF_STOCK:
                status_counts.out_of_stock += 1
            elif status == StockStatus.LOW:
                status_counts.low += 1
            else:
                status_counts.normal += 1

        return StockAnalytics(
            total_ingredients=len(ingredients),
            category_counts=category_counts,
            stock_status=status_counts,
            recent_transactions=self.list_transactions(limit=RECENT_TRANSACTION_LIMIT),
        )

    def export_inventory_csv(self) -> str:
        rows = [
            [
                item.name,
                item.category or "",
                _format_quantity(item.stock_quantity),
                item.unit,
                _format_quantity(item.reorder_level),
                _format_quantity(item.cost),
                item.supplier or "",
                item.type or "",
                item.origin or "",
                ", ".join(item.allergens or []),
                ", ".join(item.dietary or []),
                item.updated_at.strftime("%Y-%m-%d") if item.updated_at else "",
            ]
            for item in self.list_ingredients()
        ]
        return to_csv(INVENTORY_EXPORT_HEADERS, rows)

    def export_transactions_csv(self) -> str:
        rows = [
            [
                tx.created_at.strftime("%Y-%m-%d") if tx.created_at else "",
                tx.ingredient_name,
                tx.transaction_type.value,
                _format_quantity(tx.quantity),
                _format_quantity(tx.previous_quantity),
                _format_quantity(tx.new_quantity),
                tx.unit,
                tx.notes or "",
            ]
            for tx in self.list_transactions()
        ]
        return to_csv(TRANSACTION_EXPORT_HEADERS, rows)

    def _record(
        self,
        ingredient: Ingredient,
        transaction_type: TransactionType,
        quantity: float,
        previous: float,
        notes: str,
    ) -> InventoryTransaction:
        transaction = InventoryTransaction(
            ingredient_id=ingredient.id,
            transaction_type=transaction_type,
            quantity=quantity,
            previous_quantity=previous,
            new_quantity=ingredient.stock_quantity,
            unit=ingredient.unit,
            notes=notes,
        )
        self.db.add(transaction)
        return transaction
