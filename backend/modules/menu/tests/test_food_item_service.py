# backend/modules/menu/tests/test_food_item_service.py

import pytest
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError, ValidationError
from modules.menu.models.menu_models import FoodItem, FoodItemModifier
from modules.menu.schemas.menu_schemas import (
    FoodItemCreate, FoodItemSearchParams, FoodItemUpdate, SortField, SortOrder,
)
from modules.menu.services.menu_service import (
    MenuService, NAME_AND_PRICE_REQUIRED, calculate_profit_margin,
)
from tests.factories import CategoryFactory, FoodItemFactory, ModifierGroupFactory


class TestFoodItemValidation:
    """Required fields are checked before any database call"""

    @pytest.mark.parametrize("payload", [
        {"price": 9.5},
        {"name": "", "price": 9.5},
        {"name": "Tibs"},
        {"name": "Tibs", "price": 0},
    ])
    def test_create_without_name_or_price(self, mock_db_session, payload):
        """Test missing name or price fails without touching the session"""
        service = MenuService(mock_db_session)

        with pytest.raises(ValidationError) as exc_info:
            service.create_food_item(FoodItemCreate(**payload))

        assert exc_info.value.detail == NAME_AND_PRICE_REQUIRED
        mock_db_session.add.assert_not_called()
        mock_db_session.query.assert_not_called()
        mock_db_session.commit.assert_not_called()

    def test_update_without_name_or_price(self, mock_db_session):
        service = MenuService(mock_db_session)

        with pytest.raises(ValidationError):
            service.update_food_item(3, FoodItemUpdate(name="Tibs"))

        mock_db_session.query.assert_not_called()

    def test_update_without_id(self, mock_db_session):
        service = MenuService(mock_db_session)

        with pytest.raises(ValidationError) as exc_info:
            service.update_food_item(None, FoodItemUpdate(name="Tibs", price=12))

        assert exc_info.value.detail == "Food item ID is required for update"
        mock_db_session.query.assert_not_called()


class TestFoodItemService:

    def test_profit_margin(self):
        assert calculate_profit_margin(10.0, 4.0) == 60.0
        assert calculate_profit_margin(10.0, None) is None
        assert calculate_profit_margin(0, 4.0) is None

    def test_create_links_modifier_groups(self, db_session: Session):
        """Test a new food item is linked to each modifier group once"""
        size = ModifierGroupFactory(name="Size")
        spice = ModifierGroupFactory(name="Spice Level")
        category = CategoryFactory(name="Mains")
        service = MenuService(db_session)

        item = service.create_food_item(FoodItemCreate(
            name="Doro Wat",
            price=16.0,
            cost=6.0,
            category_id=category.id,
            modifier_group_ids=[size.id, spice.id, size.id],
        ))

        assert item.profit_margin == 62.5
        assert item.category_name == "Mains"
        assert sorted(item.modifier_group_ids) == sorted([size.id, spice.id])

    def test_create_with_unknown_modifier_group(self, db_session: Session):
        service = MenuService(db_session)

        with pytest.raises(NotFoundError):
            service.create_food_item(FoodItemCreate(name="Kitfo", price=18, modifier_group_ids=[99]))

    def test_update_replaces_modifier_links(self, db_session: Session):
        """Test modifier links are replaced, not appended"""
        size = ModifierGroupFactory(name="Size")
        spice = ModifierGroupFactory(name="Spice Level")
        service = MenuService(db_session)
        item = service.create_food_item(FoodItemCreate(name="Shiro", price=11, modifier_group_ids=[size.id]))

        updated = service.update_food_item(item.id, FoodItemUpdate(
            name="Shiro Wat", price=12, modifier_group_ids=[spice.id],
        ))

        assert updated.name == "Shiro Wat"
        assert updated.modifier_group_ids == [spice.id]
        assert db_session.query(FoodItemModifier).count() == 1

    def test_delete_food_item_removes_links(self, db_session: Session):
        group = ModifierGroupFactory()
        service = MenuService(db_session)
        item = service.create_food_item(FoodItemCreate(name="Firfir", price=9, modifier_group_ids=[group.id]))

        service.delete_food_item(item.id)

        assert db_session.query(FoodItem).count() == 0
        assert db_session.query(FoodItemModifier).count() == 0

    def test_modifier_group_in_use_cannot_be_deleted(self, db_session: Session):
        group = ModifierGroupFactory()
        service = MenuService(db_session)
        service.create_food_item(FoodItemCreate(name="Tibs", price=14, modifier_group_ids=[group.id]))

        with pytest.raises(ConflictError) as exc_info:
            service.delete_modifier_group(group.id)
        assert exc_info.value.detail == "Cannot delete group as it is used by food items"

    def test_delete_category_uncategorizes_items(self, db_session: Session):
        item = FoodItemFactory()
        service = MenuService(db_session)

        service.delete_category(item.category_id)

        db_session.refresh(item)
        assert item.category_id is None
        assert item.category_name == "Uncategorized"

    def test_toggle_availability(self, db_session: Session):
        item = FoodItemFactory(available=True)
        service = MenuService(db_session)

        item, message = service.toggle_availability(item.id)
        assert item.available is False
        assert message == "Food item disabled"

        item, message = service.toggle_availability(item.id)
        assert message == "Food item enabled"

    def test_search_sort_and_paginate(self, db_session: Session):
        """Test search matches name or description and sorting is stable"""
        category = CategoryFactory()
        FoodItemFactory(name="Beef Tibs", description="Sauteed beef", price=15, category=category)
        FoodItemFactory(name="Lamb Tibs", description="Sauteed lamb", price=17, category=category)
        FoodItemFactory(name="Salad", description="With tibs dressing", price=8, category=category)
        FoodItemFactory(name="Coffee", description="Buna", price=3, category=category)
        service = MenuService(db_session)

        items, total = service.search_food_items(FoodItemSearchParams(
            query="tibs", sort_by=SortField.PRICE, sort_order=SortOrder.DESC, page=1, size=2,
        ))

        assert total == 3
        assert [item.name for item in items] == ["Lamb Tibs", "Beef Tibs"]

        items, _ = service.search_food_items(FoodItemSearchParams(
            query="tibs", sort_by=SortField.PRICE, sort_order=SortOrder.DESC, page=2, size=2,
        ))
        assert [item.name for item in items] == ["Salad"]

    def test_export_csv(self, db_session: Session):
        FoodItemFactory(name='Special "House" Platter', price=25, cost=10, is_spicy=True)
        service = MenuService(db_session)

        lines = service.export_food_items_csv().split("\n")

        assert lines[0].startswith('"Name","Category","Price","Cost"')
        assert lines[1].startswith('"Special ""House"" Platter"')
        assert '"25.00","10.00"' in lines[1]

    def test_export_csv_empty(self, db_session: Session):
        assert MenuService(db_session).export_food_items_csv() == ""
