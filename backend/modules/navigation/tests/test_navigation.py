# backend/modules/navigation/tests/test_navigation.py

import dataclasses

import pytest
from fastapi.testclient import TestClient

from modules.navigation.descriptors import NAVIGATION, InterfaceKind, get_navigation


class TestNavigationDescriptors:

    @pytest.mark.parametrize("kind,title", [
        (InterfaceKind.ADMIN, "Administrative Portal"),
        (InterfaceKind.WAITER, "Waiter Interface"),
        (InterfaceKind.KITCHEN, "Kitchen Staff Interface"),
        (InterfaceKind.CUSTOMER, "Menu & Feedback"),
        (InterfaceKind.SYSTEM, "System Administration"),
    ])
    def test_titles(self, kind, title):
        assert get_navigation(kind).title == title

    def test_every_kind_has_navigation_ending_in_logout(self):
        assert set(NAVIGATION) == set(InterfaceKind)
        for descriptor in NAVIGATION.values():
            assert descriptor.sections[-1].path == "/login"

    def test_waiter_paths(self):
        paths = [section.path for section in get_navigation("waiter").sections]
        assert paths == [
            "/waiter", "/waiter/tables", "/waiter/orders", "/waiter/payments", "/waiter/tasks", "/login",
        ]

    def test_descriptors_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_navigation(InterfaceKind.ADMIN).title = "Changed"

    def test_active_section_matches_submenu(self):
        admin = get_navigation(InterfaceKind.ADMIN)

        assert admin.active_section("/admin/general/table-management").label == "General"
        assert admin.active_section("/admin/activity").label == "Activity Log"
        assert admin.active_section("/nowhere") is None

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            get_navigation("chef")


class TestNavigationEndpoint:

    def test_admin_navigation(self, client: TestClient):
        body = client.get("/navigation/admin", params={"current_path": "/admin/finance/expenses"}).json()

        assert body["title"] == "Administrative Portal"
        finance = next(s for s in body["sections"] if s["label"] == "Sales & Finance")
        assert finance["active"] is True
        assert {"label": "Expenses", "to": "expenses", "path": "/admin/finance/expenses"} in finance["submenu"]
        assert sum(s["active"] for s in body["sections"]) == 1

    def test_unknown_kind_is_rejected(self, client: TestClient):
        assert client.get("/navigation/chef").status_code == 422
