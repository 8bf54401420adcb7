# backend/modules/navigation/descriptors.py

"""
Fixed navigation for each interface kind.

Every kind of interface (admin portal, waiter tablet, kitchen display,
customer menu, system console) has one title and an ordered list of
sections. Submenu entries hold a path relative to their section.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class InterfaceKind(str, Enum):
    ADMIN = "admin"
    WAITER = "waiter"
    KITCHEN = "kitchen"
    CUSTOMER = "customer"
    SYSTEM = "system"


@dataclass(frozen=True)
class SubmenuItem:
    to: str
    label: str


@dataclass(frozen=True)
class NavSection:
    label: str
    path: str
    submenu: Tuple[SubmenuItem, ...] = ()

    def submenu_path(self, item: SubmenuItem) -> str:
        return f"{self.path.rstrip('/')}/{item.to}"


@dataclass(frozen=True)
class NavigationDescriptor:
    kind: InterfaceKind
    title: str
    sections: Tuple[NavSection, ...]

    def active_section(self, pathname: str) -> Optional[NavSection]:
        """The section whose path or submenu path equals ``pathname``"""
        for section in self.sections:
            if section.path == pathname:
                return section
            if any(section.submenu_path(item) == pathname for item in section.submenu):
                return section
        return None


def _submenu(*items: Tuple[str, str]) -> Tuple[SubmenuItem, ...]:
    return tuple(SubmenuItem(to=to, label=label) for to, label in items)


LOGOUT = NavSection("Logout", "/login")

ADMIN_SECTIONS = (
    NavSection("Dashboard", "/"),
    NavSection("Sales & Finance", "/admin/finance", _submenu(
        ("daily-sales", "Daily Sales"),
        ("financial-reports", "Financial Reports"),
        ("payment-management", "Payment Management"),
        ("expenses", "Expenses"),
        ("budgeting", "Budgeting"),
    )),
    NavSection("Staff Management", "/admin/staff", _submenu(
        ("directory", "Staff Directory"),
        ("performance", "Performance"),
        ("attendance", "Attendance"),
        ("tasks", "Tasks"),
        ("payroll", "Payroll"),
    )),
    NavSection("Menu Management", "/admin/menu", _submenu(
        ("food", "Food Items"),
        ("categories", "Categories"),
        ("recipes", "Recipes"),
        ("modifiers", "Modifiers"),
        ("pricing", "Pricing"),
        ("design", "Menu Design"),
    )),
    NavSection("Inventory", "/admin/inventory", _submenu(
        ("stock", "Stock Levels"),
        ("ingredients", "Ingredients"),
        ("recipes", "Recipes"),
        ("suppliers", "Suppliers"),
        ("purchase-orders", "Purchase Orders"),
    )),
    NavSection("Food Hygiene", "/admin/food-safety", _submenu(
        ("checklists", "Safety Checklists"),
        ("temperature", "Temperature Logs"),
        ("inspections", "Inspections"),
        ("training", "Staff Training"),
    )),
    NavSection("Reports", "/admin/reports", _submenu(
        ("sales", "Sales Analytics"),
        ("staff", "Staff Reports"),
        ("inventory", "Inventory Reports"),
        ("customers", "Customer Insights"),
        ("custom", "Custom Reports"),
    )),
    NavSection("Customers", "/admin/customers", _submenu(
        ("database", "Customer Database"),
        ("feedback", "Feedback"),
        ("promotions", "Promotions"),
        ("loyalty", "Loyalty Program"),
    )),
    NavSection("General", "/admin/general", _submenu(
        ("table-management", "Table Management"),
    )),
    NavSection("Settings", "/admin/settings", _submenu(
        ("profile", "Restaurant Profile"),
        ("users", "User Access"),
        ("devices", "Printers & Devices"),
        ("logs", "System Logs"),
        ("integrations", "Integrations"),
    )),
    NavSection("Activity Log", "/admin/activity"),
    NavSection("Language Management", "/admin/language"),
    LOGOUT,
)

WAITER_SECTIONS = (
    NavSection("Dashboard", "/waiter"),
    NavSection("Table Management", "/waiter/tables"),
    NavSection("Order Management", "/waiter/orders"),
    NavSection("Payment Processing", "/waiter/payments"),
    NavSection("Tasks", "/waiter/tasks"),
    LOGOUT,
)

KITCHEN_SECTIONS = (
    NavSection("Dashboard", "/kitchen"),
    NavSection("Order Processing", "/kitchen/orders"),
    NavSection("Inventory Check", "/kitchen/inventory"),
    NavSection("Menu Availability", "/kitchen/menu-availability"),
    NavSection("Tasks", "/kitchen/tasks"),
    NavSection("Food Safety", "/kitchen/food-safety"),
    LOGOUT,
)

CUSTOMER_SECTIONS = (
    NavSection("Menu", "/menu"),
    NavSection("Feedback", "/feedback"),
    NavSection("Promotions", "/promotions"),
    LOGOUT,
)

SYSTEM_SECTIONS = (
    NavSection("Dashboard", "/system"),
    NavSection("Error Logs", "/system/errors"),
    NavSection("User Management", "/system/users"),
    NavSection("Documentation", "/system/docs"),
    LOGOUT,
)

NAVIGATION: Dict[InterfaceKind, NavigationDescriptor] = {
    InterfaceKind.ADMIN: NavigationDescriptor(InterfaceKind.ADMIN, "Administrative Portal", ADMIN_SECTIONS),
    InterfaceKind.WAITER: NavigationDescriptor(InterfaceKind.WAITER, "Waiter Interface", WAITER_SECTIONS),
    InterfaceKind.KITCHEN: NavigationDescriptor(InterfaceKind.KITCHEN, "Kitchen Staff Interface", KITCHEN_SECTIONS),
    InterfaceKind.CUSTOMER: NavigationDescriptor(InterfaceKind.CUSTOMER, "Menu & Feedback", CUSTOMER_SECTIONS),
    InterfaceKind.SYSTEM: NavigationDescriptor(InterfaceKind.SYSTEM, "System Administration", SYSTEM_SECTIONS),
}


def get_navigation(kind: InterfaceKind) -> NavigationDescriptor:
    return NAVIGATION[InterfaceKind(kind)]
