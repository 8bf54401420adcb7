# backend/modules/tables/floor_plan/element.py

"""
Interactive state for a single table on the floor plan.

A ``TableElement`` keeps its own position, size and rotation while the
user drags, resizes or rotates it, and reports every change through
callbacks so the editor can track it against the persisted values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..models.table_models import MIN_TABLE_SIZE, DEFAULT_TABLE_SIZE

ROTATION_STEP = 45

PositionCallback = Callable[[int, int], None]
SizeCallback = Callable[[int, int], None]
RotationCallback = Callable[[int], None]


class EditTool(str, Enum):
    """Floor plan editing tools, only one active at a time"""

    SELECT = "select"
    MOVE = "move"
    RESIZE = "resize"
    ROTATE = "rotate"


@dataclass(frozen=True)
class TableLayout:
    """Position, size and rotation of a table"""

    position_x: int = 0
    position_y: int = 0
    width: int = DEFAULT_TABLE_SIZE
    height: int = DEFAULT_TABLE_SIZE
    rotation: int = 0

    @classmethod
    def from_table(cls, table: Any) -> "TableLayout":
        """Build from an ORM row or any object with the layout attributes"""
        def value(name, default):
            current = getattr(table, name, None)
            return default if current is None else int(current)

        return cls(
            position_x=value("position_x", 0),
            position_y=value("position_y", 0),
            width=value("width", DEFAULT_TABLE_SIZE),
            height=value("height", DEFAULT_TABLE_SIZE),
            rotation=value("rotation", 0),
        )

    def as_dict(self) -> dict:
        return {
            "position_x": self.position_x,
            "position_y": self.position_y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
        }


class TableElement:
    """One table's drag, resize and rotate interaction"""

    def __init__(
        self,
        table_id: int,
        layout: Optional[TableLayout] = None,
        on_position_change: Optional[PositionCallback] = None,
        on_size_change: Optional[SizeCallback] = None,
        on_rotation_change: Optional[RotationCallback] = None,
    ):
        layout = layout or TableLayout()
        self.table_id = table_id
        self.position_x = layout.position_x
        self.position_y = layout.position_y
        self.width = layout.width
        self.height = layout.height
        self.rotation = layout.rotation

        self.on_position_change = on_position_change
        self.on_size_change = on_size_change
        self.on_rotation_change = on_rotation_change

        # Active gesture: EditTool.MOVE, EditTool.RESIZE or None
        self._gesture: Optional[EditTool] = None
        self._origin_x = 0
        self._origin_y = 0
        self._start_width = self.width
        self._start_height = self.height

    @property
    def layout(self) -> TableLayout:
        return TableLayout(
            position_x=self.position_x,
            position_y=self.position_y,
            width=self.width,
            height=self.height,
            rotation=self.rotation,
        )

    @property
    def is_tracking(self) -> bool:
        """True while pointer move/up listeners are attached"""
        return self._gesture is not None

    @property
    def is_dragging(self) -> bool:
        return self._gesture == EditTool.MOVE

    def pointer_down(self, x: int, y: int, tool: EditTool) -> None:
        tool = EditTool(tool)
        if tool == EditTool.MOVE:
            self._attach(EditTool.MOVE, x, y)
        elif tool == EditTool.RESIZE:
            self._start_width = self.width
            self._start_height = self.height
            self._attach(EditTool.RESIZE, x, y)
        elif tool == EditTool.ROTATE:
            self.rotate()

    def pointer_move(self, x: int, y: int) -> None:
        if self._gesture == EditTool.MOVE:
            dx = x - self._origin_x
            dy = y - self._origin_y
            self._origin_x = x
            self._origin_y = y
            self.set_position(self.position_x + dx, self.position_y + dy)
        elif self._gesture == EditTool.RESIZE:
            self.set_size(
                self._start_width + (x - self._origin_x),
                self._start_height + (y - self._origin_y),
            )

    def pointer_up(self) -> None:
        self._gesture = None

    def rotate(self) -> int:
        """Advance rotation by one step and commit it right away"""
        self.rotation = (self.rotation + ROTATION_STEP) % 360
        if self.on_rotation_change:
            self.on_rotation_change(self.rotation)
        return self.rotation

    def set_position(self, position_x: int, position_y: int) -> None:
        self.position_x = position_x
        self.position_y = position_y
        if self.on_position_change:
            self.on_position_change(position_x, position_y)

    def set_size(self, width: int, height: int) -> None:
        self.width = max(MIN_TABLE_SIZE, width)
        self.height = max(MIN_TABLE_SIZE, height)
        if self.on_size_change:
            self.on_size_change(self.width, self.height)

    def reset(self, layout: TableLayout) -> None:
        """Restore a layout without notifying listeners"""
        self._gesture = None
        self.position_x = layout.position_x
        self.position_y = layout.position_y
        self.width = layout.width
        self.height = layout.height
        self.rotation = layout.rotation

    def _attach(self, gesture: EditTool, x: int, y: int) -> None:
        self._gesture = gesture
        self._origin_x = x
        self._origin_y = y
