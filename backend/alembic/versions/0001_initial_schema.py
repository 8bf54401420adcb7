"""Initial back-office schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2024-03-01 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade():
    # Floor plan
    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        'restaurant_tables',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('room_id', sa.Integer(), sa.ForeignKey('rooms.id'), nullable=True),
        sa.Column('table_number', sa.String(20), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='4'),
        sa.Column('location', sa.String(100)),
        sa.Column(
            'status',
            sa.Enum('AVAILABLE', 'OCCUPIED', 'RESERVED', 'CLEANING', name='tablestatus'),
            nullable=False,
            server_default='AVAILABLE',
        ),
        sa.Column(
            'shape',
            sa.Enum('RECTANGLE', 'CIRCLE', name='tableshape'),
            nullable=False,
            server_default='RECTANGLE',
        ),
        sa.Column('position_x', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('position_y', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('width', sa.Integer(), nullable=False, server_default='100'),
        sa.Column('height', sa.Integer(), nullable=False, server_default='100'),
        sa.Column('rotation', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.CheckConstraint('capacity >= 1', name='check_capacity_positive'),
        sa.CheckConstraint('width >= 50', name='check_min_width'),
        sa.CheckConstraint('height >= 50', name='check_min_height'),
        sa.CheckConstraint('rotation >= 0 AND rotation < 360', name='check_rotation_range'),
    )
    op.create_index('ix_restaurant_tables_room_id', 'restaurant_tables', ['room_id'])

    # Menu
    op.create_table(
        'menu_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_menu_categories_name', 'menu_categories', ['name'])

    op.create_table(
        'food_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('cost', sa.Float()),
        sa.Column('profit_margin', sa.Float()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('menu_categories.id'), nullable=True),
        sa.Column('available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_vegetarian', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_vegan', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_gluten_free', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_spicy', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('preparation_time', sa.Integer()),
        *_timestamps(),
    )
    op.create_index('ix_food_items_name', 'food_items', ['name'])

    op.create_table(
        'modifier_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('required', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('ix_modifier_groups_name', 'modifier_groups', ['name'])

    op.create_table(
        'modifier_options',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('modifier_group_id', sa.Integer(), sa.ForeignKey('modifier_groups.id'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        *_timestamps(),
    )

    op.create_table(
        'food_item_modifiers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('food_item_id', sa.Integer(), sa.ForeignKey('food_items.id'), nullable=False),
        sa.Column('modifier_group_id', sa.Integer(), sa.ForeignKey('modifier_groups.id'), nullable=False),
        sa.UniqueConstraint('food_item_id', 'modifier_group_id', name='uq_food_item_modifier_group'),
    )

    # Inventory
    op.create_table(
        'ingredients',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('category', sa.String(100)),
        sa.Column('stock_quantity', sa.Float(), nullable=False, server_default='0'),
        sa.Column('reorder_level', sa.Float(), nullable=False, server_default='0'),
        sa.Column('unit', sa.String(20), nullable=False),
        sa.Column('cost', sa.Float()),
        sa.Column('supplier', sa.String(200)),
        sa.Column('origin', sa.String(100)),
        sa.Column('allergens', sa.JSON()),
        sa.Column('dietary', sa.JSON()),
        sa.Column('type', sa.String(50)),
        *_timestamps(),
    )
    op.create_index('ix_ingredients_name', 'ingredients', ['name'])
    op.create_index('ix_ingredients_category', 'ingredients', ['category'])

    op.create_table(
        'inventory_transactions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('ingredient_id', sa.Integer(), sa.ForeignKey('ingredients.id'), nullable=False),
        sa.Column(
            'transaction_type',
            sa.Enum('INITIAL', 'PURCHASE', 'ADJUSTMENT', 'WASTE', 'CONSUMPTION', name='transactiontype'),
            nullable=False,
        ),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('previous_quantity', sa.Float(), nullable=False),
        sa.Column('new_quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(20), nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_inventory_transactions_ingredient_id', 'inventory_transactions', ['ingredient_id'])
    op.create_index('ix_inventory_transactions_created_at', 'inventory_transactions', ['created_at'])

    # Staff
    op.create_table(
        'staff_members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('phone', sa.String(50)),
        sa.Column(
            'role',
            sa.Enum('admin', 'waiter', 'chef', 'dishwasher', 'manager', name='staffrole'),
            nullable=False,
        ),
        sa.Column('department', sa.String(100)),
        sa.Column(
            'status',
            sa.Enum('active', 'inactive', 'on_leave', name='staffstatus'),
            nullable=False,
        ),
        sa.Column('address', sa.Text()),
        sa.Column('hourly_rate', sa.Float()),
        sa.Column('bio', sa.Text()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('gender', sa.String(20)),
        sa.Column('performance', sa.Integer()),
        sa.Column('attendance', sa.Integer()),
        sa.Column('hiring_date', sa.Date()),
        *_timestamps(),
    )
    op.create_index('ix_staff_members_email', 'staff_members', ['email'], unique=True)

    op.create_table(
        'staff_attendance',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('staff_id', sa.Integer(), sa.ForeignKey('staff_members.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('check_in', sa.DateTime()),
        sa.Column('check_out', sa.DateTime()),
        sa.Column(
            'status',
            sa.Enum('present', 'absent', 'late', 'on_leave', name='attendancestatus'),
            nullable=False,
        ),
        sa.Column('hours_worked', sa.Float()),
        sa.Column('notes', sa.Text()),
        *_timestamps(),
        sa.UniqueConstraint('staff_id', 'date', name='uq_staff_attendance_day'),
    )
    op.create_index('ix_staff_attendance_staff_id', 'staff_attendance', ['staff_id'])
    op.create_index('ix_staff_attendance_date', 'staff_attendance', ['date'])

    # Finance
    op.create_table(
        'expense_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column(
            'type',
            sa.Enum('FIXED', 'VARIABLE', 'OPERATIONAL', 'DISCRETIONARY', name='expensetype'),
            nullable=False,
            server_default='OPERATIONAL',
        ),
        *_timestamps(),
    )
    op.create_index('ix_expense_categories_name', 'expense_categories', ['name'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('expense_categories.id'), nullable=True),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('payee', sa.String(200), nullable=False),
        sa.Column('payment_method', sa.String(50)),
        sa.Column('reference', sa.String(100)),
        sa.Column('description', sa.Text()),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), sa.ForeignKey('ingredients.id'), nullable=True),
        sa.Column('quantity', sa.Float()),
        sa.Column('unit', sa.String(20)),
        *_timestamps(),
    )
    op.create_index('ix_expenses_category_id', 'expenses', ['category_id'])
    op.create_index('ix_expenses_date', 'expenses', ['date'])


def downgrade():
    op.drop_table('expenses')
    op.drop_table('expense_categories')
    op.drop_table('staff_attendance')
    op.drop_table('staff_members')
    op.drop_table('inventory_transactions')
    op.drop_table('ingredients')
    op.drop_table('food_item_modifiers')
    op.drop_table('modifier_options')
    op.drop_table('modifier_groups')
    op.drop_table('food_items')
    op.drop_table('menu_categories')
    op.drop_table('restaurant_tables')
    op.drop_table('rooms')

    for enum_name in (
        'expensetype', 'attendancestatus', 'staffstatus', 'staffrole',
        'transactiontype', 'tableshape', 'tablestatus',
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
