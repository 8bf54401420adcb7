# backend/modules/tables/floor_plan/editor.py

"""
Floor plan editor state.

The editor owns the tables of the room being edited, the active tool, the
selection and the ``is_editing`` gate. Every drag or resize frame updates
local state only; nothing is written until ``save_changes`` succeeds.
Unsaved changes are measured against the last persisted layout of each
table, so dragging a table away and back again leaves nothing to save.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from core.exceptions import PersistenceError, ValidationError
from ..models.table_models import MIN_TABLE_SIZE
from .element import EditTool, TableElement, TableLayout

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]
PersistCallback = Callable[[int, Dict[str, int]], Any]

SAVE_BEFORE_EXIT_PROMPT = "You have unsaved changes. Do you want to save them before leaving edit mode?"
CHANGE_ROOM_PROMPT = "You have unsaved changes. Changing rooms will discard these changes. Continue?"
SAVE_SUCCESS_MESSAGE = "Floor plan changes saved successfully"
SAVE_FAILURE_MESSAGE = "Some changes could not be saved"
NO_CHANGES_MESSAGE = "No changes to save"


class FloorPlanEditor:
    """Edit-mode state machine for the tables of one room"""

    def __init__(self, tables: Iterable[Any] = (), room_id: Optional[int] = None):
        self.room_id = room_id
        self.is_editing = False
        self.tool = EditTool.SELECT
        self.selected_table_id: Optional[int] = None
        self.last_message: Optional[str] = None

        self.elements: Dict[int, TableElement] = {}
        self.details: Dict[int, Dict[str, Any]] = {}
        self._persisted: Dict[int, TableLayout] = {}
        self._active_table_id: Optional[int] = None
        self.load_tables(tables)

    # Loading

    def load_tables(self, tables: Iterable[Any]) -> None:
        """Replace the edited tables and take their layout as the saved baseline"""
        self.elements.clear()
        self.details.clear()
        self._persisted.clear()
        self._active_table_id = None

        for table in tables:
            layout = TableLayout.from_table(table)
            self._persisted[table.id] = layout
            self.elements[table.id] = self._build_element(table.id, layout)
            self.details[table.id] = {
                "table_number": getattr(table, "table_number", str(table.id)),
                "capacity": getattr(table, "capacity", None),
                "status": _enum_value(getattr(table, "status", None)),
                "shape": _enum_value(getattr(table, "shape", None)),
                "room_id": getattr(table, "room_id", None),
            }

        if self.selected_table_id not in self.elements:
            self.selected_table_id = None

    def _build_element(self, table_id: int, layout: TableLayout) -> TableElement:
        return TableElement(
            table_id,
            layout,
            on_position_change=lambda x, y: self.update_table_position(table_id, x, y),
            on_size_change=lambda w, h: self.update_table_size(table_id, w, h),
            on_rotation_change=lambda r: self.update_table_rotation(table_id, r),
        )

    # Modes

    def enter_edit_mode(self) -> None:
        self.is_editing = True
        self.tool = EditTool.SELECT
        self.selected_table_id = None
        self._release_active()

    def set_tool(self, tool: EditTool) -> None:
        tool = EditTool(tool)
        if not self.is_editing and tool != EditTool.SELECT:
            raise ValidationError("Enter edit mode before choosing an editing tool")
        self._release_active()
        self.tool = tool

    def exit_edit_mode(
        self,
        confirm: ConfirmCallback,
        persist: Optional[PersistCallback] = None,
    ) -> bool:
        """
        Leave edit mode.

        Without unsaved changes the editor exits straight away. Otherwise
        ``confirm`` is asked once: accepting saves and then exits, declining
        restores the last saved layout and exits. A failed save keeps the
        editor in edit mode with its changes intact.

        Returns True when the changes were saved as part of leaving.
        """
        saved = False
        if self.has_unsaved_changes:
            if confirm(SAVE_BEFORE_EXIT_PROMPT):
                if persist is None:
                    raise ValueError("A persist callback is required to save changes")
                self.save_changes(persist)
                saved = True
            else:
                self.revert_changes()

        self._release_active()
        self.is_editing = False
        self.tool = EditTool.SELECT
        return saved

    # Pointer interaction

    def press_table(self, table_id: int, x: int = 0, y: int = 0) -> None:
        """Pointer down on a table: select it, and start the tool's gesture while editing"""
        element = self._element(table_id)
        self.selected_table_id = table_id
        if not self.is_editing or self.tool == EditTool.SELECT:
            return

        self._release_active()
        element.pointer_down(x, y, self.tool)
        if element.is_tracking:
            self._active_table_id = table_id

    def move_pointer(self, x: int, y: int) -> None:
        if self._active_table_id is not None:
            self.elements[self._active_table_id].pointer_move(x, y)

    def release_pointer(self) -> None:
        self._release_active()

    def rotate_table(self, table_id: int) -> int:
        if not self.is_editing:
            raise ValidationError("Enter edit mode before rotating tables")
        self.selected_table_id = table_id
        return self._element(table_id).rotate()

    def _release_active(self) -> None:
        if self._active_table_id is not None:
            self.elements[self._active_table_id].pointer_up()
            self._active_table_id = None

    # Local updates, called on every drag or resize frame

    def update_table_position(self, table_id: int, position_x: int, position_y: int) -> None:
        element = self._element(table_id)
        element.position_x = position_x
        element.position_y = position_y

    def update_table_size(self, table_id: int, width: int, height: int) -> None:
        element = self._element(table_id)
        element.width = max(MIN_TABLE_SIZE, width)
        element.height = max(MIN_TABLE_SIZE, height)

    def update_table_rotation(self, table_id: int, rotation: int) -> None:
        self._element(table_id).rotation = rotation % 360

    # Dirty tracking

    @property
    def modified_tables(self) -> Dict[int, Dict[str, int]]:
        """Fields that differ from the last saved layout, per table"""
        modified = {}
        for table_id, element in self.elements.items():
            current = element.layout.as_dict()
            persisted = self._persisted[table_id].as_dict()
            changes = {key: value for key, value in current.items() if persisted[key] != value}
            if changes:
                modified[table_id] = changes
        return modified

    @property
    def has_unsaved_changes(self) -> bool:
        return bool(self.modified_tables)

    def save_changes(self, persist: PersistCallback) -> int:
        """
        Write every modified table through ``persist``.

        Tables that were written become the new baseline. If any write
        fails the remaining tables stay modified and PersistenceError is
        raised. Returns the number of tables saved.
        """
        modified = self.modified_tables
        if not modified:
            self.last_message = NO_CHANGES_MESSAGE
            return 0

        failed: List[int] = []
        for table_id, changes in modified.items():
            try:
                persist(table_id, changes)
            except Exception as e:
                logger.error(f"Error saving floor plan changes for table {table_id}: {e}")
                failed.append(table_id)
                continue
            self._persisted[table_id] = self.elements[table_id].layout

        if failed:
            self.last_message = SAVE_FAILURE_MESSAGE
            raise PersistenceError(SAVE_FAILURE_MESSAGE, error_code="FLOOR_PLAN_SAVE_FAILED")

        self.last_message = SAVE_SUCCESS_MESSAGE
        logger.info(f"Saved floor plan changes for {len(modified)} tables")
        return len(modified)

    def revert_changes(self) -> None:
        """Restore every table to its last saved layout"""
        self._release_active()
        for table_id, element in self.elements.items():
            element.reset(self._persisted[table_id])

    # Rooms

    def change_room(
        self,
        room_id: Optional[int],
        tables: Iterable[Any],
        confirm: ConfirmCallback,
    ) -> bool:
        """Switch to another room, asking first if that would discard changes"""
        if self.has_unsaved_changes and not confirm(CHANGE_ROOM_PROMPT):
            return False

        self.room_id = room_id
        self.selected_table_id = None
        self.load_tables(tables)
        return True

    # Introspection

    def snapshot(self) -> Dict[str, Any]:
        modified = self.modified_tables
        return {
            "room_id": self.room_id,
            "is_editing": self.is_editing,
            "tool": self.tool.value,
            "selected_table_id": self.selected_table_id,
            "has_unsaved_changes": bool(modified),
            "modified_table_ids": sorted(modified),
            "message": self.last_message,
            "tables": [
                {"id": table_id, **self.details[table_id], **element.layout.as_dict()}
                for table_id, element in self.elements.items()
            ],
        }

    def _element(self, table_id: int) -> TableElement:
        try:
            return self.elements[table_id]
        except KeyError:
            raise KeyError(f"Table {table_id} is not on this floor plan")


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)
