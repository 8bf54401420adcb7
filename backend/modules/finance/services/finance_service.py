# backend/modules/finance/services/finance_service.py

from datetime import date, timedelta
from typing import Callable, Dict, List, Optional
import calendar
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from core.crud import CRUDRepository
from core.exceptions import ConflictError
from core.exports import render_print_document, to_csv
from modules.inventory.services.inventory_service import InventoryService
from ..models.finance_models import Expense, ExpenseCategory
from ..schemas.finance_schemas import (
    DatePreset, ExpenseCategoryCreate, ExpenseCategoryUpdate,
    ExpenseCreate, ExpenseFilters, ExpenseSummary, ExpenseUpdate,
)

logger = logging.getLogger(__name__)

PURCHASE_NOTE = "Added through expense tracking"

EXPENSE_EXPORT_HEADERS = [
    "Date", "Category", "Amount", "Payee", "Payment Method", "Reference",
    "Inventory Item", "Quantity", "Unit", "Description",
]

CATEGORY_EXPORT_HEADERS = ["Name", "Type", "Description"]

REPORT_HEADERS = ["Date", "Category", "Payee", "Payment Method", "Reference", "Amount"]


def one_month_before(day: date) -> date:
    """Same day of the previous month, clamped to that month's length"""
    year, month = (day.year - 1, 12) if day.month == 1 else (day.year, day.month - 1)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def preset_start(preset: DatePreset, today: date) -> date:
    if preset == DatePreset.TODAY:
        return today
    if preset == DatePreset.THIS_WEEK:
        return today - timedelta(days=7)
    return one_month_before(today)


class FinanceService:
    """Expense tracking and expense categories"""

    def __init__(self, db: Session, today: Callable[[], date] = date.today):
        self.db = db
        self.today = today
        self.categories = CRUDRepository(ExpenseCategory, db, label="Expense category")
        self.expenses = CRUDRepository(Expense, db, label="Expense")

    # Categories
    def list_categories(self) -> List[ExpenseCategory]:
        return self.categories.list(order_by="name")

    def get_category(self, category_id: int) -> ExpenseCategory:
        return self.categories.get_or_404(category_id)

    def create_category(self, category_data: ExpenseCategoryCreate) -> ExpenseCategory:
        return self.categories.create(category_data.model_dump())

    def update_category(self, category_id: int, category_data: ExpenseCategoryUpdate) -> ExpenseCategory:
        return self.categories.update(category_id, category_data.model_dump(exclude_unset=True))

    def delete_category(self, category_id: int) -> None:
        self.categories.get_or_404(category_id)
        if self.expenses.count({"category_id": category_id}):
            raise ConflictError(
                "Cannot delete this category because it has associated expenses",
                error_code="CATEGORY_IN_USE",
            )
        self.categories.delete(category_id)

    # Expenses
    def list_expenses(self, filters: Optional[ExpenseFilters] = None) -> List[Expense]:
        filters = filters or ExpenseFilters()
        query = self.db.query(Expense).options(joinedload(Expense.category))

        if filters.search:
            term = f"%{filters.search}%"
            query = query.filter(
                or_(
                    Expense.payee.ilike(term),
                    Expense.description.ilike(term),
                    Expense.reference.ilike(term),
                )
            )

        if filters.category_id is not None:
            query = query.filter(Expense.category_id == filters.category_id)

        if filters.preset is not None:
            query = query.filter(Expense.date >= preset_start(filters.preset, self.today()))
        else:
            if filters.start_date:
                query = query.filter(Expense.date >= filters.start_date)
            if filters.end_date:
                query = query.filter(Expense.date <= filters.end_date)

        return query.order_by(Expense.date.desc(), Expense.id.desc()).all()

    def get_expense(self, expense_id: int) -> Expense:
        return self.expenses.get_or_404(expense_id)

    def create_expense(self, expense_data: ExpenseCreate) -> Expense:
        """
        Record an expense.

        An expense that names an ingredient and a positive quantity also adds
        that quantity to stock as a purchase, in the same transaction.
        """
        if expense_data.category_id is not None:
            self.categories.get_or_404(expense_data.category_id)

        values = expense_data.model_dump()
        if expense_data.ingredient_id is not None and expense_data.quantity:
            ingredient = InventoryService(self.db).record_purchase(
                expense_data.ingredient_id, expense_data.quantity, PURCHASE_NOTE
            )
            values["unit"] = values["unit"] or ingredient.unit
            logger.info(
                f"Expense purchase added {expense_data.quantity} {ingredient.unit} of {ingredient.name}"
            )

        expense = self.expenses.create(values)
        return expense

    def update_expense(self, expense_id: int, expense_data: ExpenseUpdate) -> Expense:
        update_data = expense_data.model_dump(exclude_unset=True)
        if update_data.get("category_id") is not None:
            self.categories.get_or_404(update_data["category_id"])
        return self.expenses.update(expense_id, update_data)

    def delete_expense(self, expense_id: int) -> None:
        self.expenses.delete(expense_id)

    def summarize(self, expenses: List[Expense]) -> ExpenseSummary:
        by_category: Dict[str, float] = {}
        for expense in expenses:
            by_category[expense.category_name] = round(
                by_category.get(expense.category_name, 0) + expense.amount, 2
            )
        return ExpenseSummary(
            total=round(sum(expense.amount for expense in expenses), 2),
            count=len(expenses),
            by_category=by_category,
        )

    # Output
    def export_expenses_csv(self, filters: Optional[ExpenseFilters] = None) -> str:
        rows = [
            [
                expense.date.isoformat(),
                expense.category_name,
                f"{expense.amount:.2f}",
                expense.payee,
                expense.payment_method or "",
                expense.reference or "",
                "Yes" if expense.is_inventory_purchase else "No",
                f"{expense.quantity:g}" if expense.quantity is not None else "",
                expense.unit or "",
                expense.description or "",
            ]
            for expense in self.list_expenses(filters)
        ]
        return to_csv(EXPENSE_EXPORT_HEADERS, rows)

    def export_categories_csv(self) -> str:
        rows = [
            [category.name, category.type.value.capitalize(), category.description or ""]
            for category in self.list_categories()
        ]
        return to_csv(CATEGORY_EXPORT_HEADERS, rows)

    def print_expense_report(self, filters: Optional[ExpenseFilters] = None) -> str:
        filters = filters or ExpenseFilters()
        expenses = self.list_expenses(filters)
        summary = self.summarize(expenses)

        if filters.preset is not None:
            subtitle = filters.preset.value
        elif filters.start_date or filters.end_date:
            subtitle = f"{filters.start_date or '...'} to {filters.end_date or '...'}"
        else:
            subtitle = "All expenses"

        rows = [
            [
                expense.date.isoformat(),
                expense.category_name,
                expense.payee,
                expense.payment_method or "",
                expense.reference or "",
                f"{expense.amount:.2f}",
            ]
            for expense in expenses
        ]
        footer = ["Total", "", "", "", "", f"{summary.total:.2f}"]
        return render_print_document("Expense Report", REPORT_HEADERS, rows, subtitle=subtitle, footer=footer)
