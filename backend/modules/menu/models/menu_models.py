# backend/modules/menu/models/menu_models.py

from sqlalchemy import (Column, Integer, String, ForeignKey, Float, Text,
                        Boolean, UniqueConstraint)
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import ActiveMixin, TimestampMixin


class MenuCategory(Base, TimestampMixin, ActiveMixin):
    """Menu categories for organizing food items"""
    __tablename__ = "menu_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    food_items = relationship("FoodItem", back_populates="category")

    def __repr__(self):
        return f"<MenuCategory(id={self.id}, name='{self.name}')>"


class FoodItem(Base, TimestampMixin):
    """Individual dishes and drinks on the menu"""
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    cost = Column(Float, nullable=True)
    profit_margin = Column(Float, nullable=True)  # Percentage of price
    image_url = Column(String(500), nullable=True)
    category_id = Column(Integer, ForeignKey("menu_categories.id"), nullable=True)

    # Availability
    available = Column(Boolean, nullable=False, default=True)

    # Dietary info
    is_vegetarian = Column(Boolean, nullable=False, default=False)
    is_vegan = Column(Boolean, nullable=False, default=False)
    is_gluten_free = Column(Boolean, nullable=False, default=False)
    is_spicy = Column(Boolean, nullable=False, default=False)

    preparation_time = Column(Integer, nullable=True)  # Minutes

    category = relationship("MenuCategory", back_populates="food_items")
    modifier_links = relationship(
        "FoodItemModifier", back_populates="food_item", cascade="all, delete-orphan"
    )

    @property
    def category_name(self) -> str:
        return self.category.name if self.category else "Uncategorized"

    @property
    def modifier_group_ids(self):
        return [link.modifier_group_id for link in self.modifier_links]

    def __repr__(self):
        return f"<FoodItem(id={self.id}, name='{self.name}', price={self.price})>"


class ModifierGroup(Base, TimestampMixin):
    """Groups of modifiers (e.g., 'Size', 'Toppings', 'Spice Level')"""
    __tablename__ = "modifier_groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    required = Column(Boolean, nullable=False, default=False)

    options = relationship(
        "ModifierOption", back_populates="modifier_group", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<ModifierGroup(id={self.id}, name='{self.name}')>"


class ModifierOption(Base, TimestampMixin):
    """Individual option within a modifier group"""
    __tablename__ = "modifier_options"

    id = Column(Integer, primary_key=True, index=True)
    modifier_group_id = Column(Integer, ForeignKey("modifier_groups.id"), nullable=False)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False, default=0.0)  # Added to the item price

    modifier_group = relationship("ModifierGroup", back_populates="options")


class FoodItemModifier(Base):
    """Link between a food item and a modifier group it offers"""
    __tablename__ = "food_item_modifiers"

    id = Column(Integer, primary_key=True, index=True)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False)
    modifier_group_id = Column(Integer, ForeignKey("modifier_groups.id"), nullable=False)

    food_item = relationship("FoodItem", back_populates="modifier_links")
    modifier_group = relationship("ModifierGroup")

    __table_args__ = (
        UniqueConstraint("food_item_id", "modifier_group_id", name="uq_food_item_modifier_group"),
    )
