# backend/modules/finance/routes/finance_routes.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from core.database import get_db
from core.exports import csv_response, html_response
from ..services.finance_service import FinanceService
from ..schemas.finance_schemas import (
    DatePreset, Expense, ExpenseCategory, ExpenseCategoryCreate,
    ExpenseCategoryUpdate, ExpenseCreate, ExpenseFilters, ExpenseList,
    ExpenseUpdate,
)

router = APIRouter(prefix="/finance", tags=["Finance"])


def get_finance_service(db: Session = Depends(get_db)) -> FinanceService:
    """Dependency to get finance service instance"""
    return FinanceService(db)


def get_expense_filters(
    search: Optional[str] = Query(None, description="Match payee, description or reference"),
    category: Optional[str] = Query(None, description="Category id or 'All'"),
    preset: Optional[DatePreset] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> ExpenseFilters:
    return ExpenseFilters(
        search=search,
        category_id=category,
        preset=preset,
        start_date=start_date,
        end_date=end_date,
    )


# Expense categories
@router.get("/categories", response_model=List[ExpenseCategory])
async def list_categories(finance_service: FinanceService = Depends(get_finance_service)):
    return finance_service.list_categories()


@router.get("/categories/export")
async def export_categories(finance_service: FinanceService = Depends(get_finance_service)):
    return csv_response(finance_service.export_categories_csv(), "expense_categories")


@router.post("/categories", response_model=ExpenseCategory, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: ExpenseCategoryCreate,
    finance_service: FinanceService = Depends(get_finance_service),
):
    return finance_service.create_category(category_data)


@router.put("/categories/{category_id}", response_model=ExpenseCategory)
async def update_category(
    category_id: int,
    category_data: ExpenseCategoryUpdate,
    finance_service: FinanceService = Depends(get_finance_service),
):
    return finance_service.update_category(category_id, category_data)


@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: int,
    finance_service: FinanceService = Depends(get_finance_service),
):
    """Delete an expense category that has no expenses"""
    finance_service.delete_category(category_id)
    return {"success": True, "message": "Category deleted successfully"}


# Expenses
@router.get("/expenses", response_model=ExpenseList)
async def list_expenses(
    filters: ExpenseFilters = Depends(get_expense_filters),
    finance_service: FinanceService = Depends(get_finance_service),
):
    """Filtered expenses, newest first, with totals per category"""
    expenses = finance_service.list_expenses(filters)
    return ExpenseList(items=expenses, summary=finance_service.summarize(expenses))


@router.get("/expenses/export")
async def export_expenses(
    filters: ExpenseFilters = Depends(get_expense_filters),
    finance_service: FinanceService = Depends(get_finance_service),
):
    return csv_response(finance_service.export_expenses_csv(filters), "expenses")


@router.get("/expenses/print")
async def print_expenses(
    filters: ExpenseFilters = Depends(get_expense_filters),
    finance_service: FinanceService = Depends(get_finance_service),
):
    return html_response(finance_service.print_expense_report(filters))


@router.post("/expenses", response_model=Expense, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    finance_service: FinanceService = Depends(get_finance_service),
):
    """Record an expense; ingredient purchases are added to stock"""
    return finance_service.create_expense(expense_data)


@router.get("/expenses/{expense_id}", response_model=Expense)
async def get_expense(
    expense_id: int,
    finance_service: FinanceService = Depends(get_finance_service),
):
    return finance_service.get_expense(expense_id)


@router.put("/expenses/{expense_id}", response_model=Expense)
async def update_expense(
    expense_id: int,
    expense_data: ExpenseUpdate,
    finance_service: FinanceService = Depends(get_finance_service),
):
    return finance_service.update_expense(expense_id, expense_data)


@router.delete("/expenses/{expense_id}")
async def delete_expense(
    expense_id: int,
    finance_service: FinanceService = Depends(get_finance_service),
):
    finance_service.delete_expense(expense_id)
    return {"success": True, "message": "Expense deleted successfully"}
