from .finance_models import ExpenseCategory, Expense, ExpenseType

__all__ = ["ExpenseCategory", "Expense", "ExpenseType"]
