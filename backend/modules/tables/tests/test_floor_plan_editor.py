# backend/modules/tables/tests/test_floor_plan_editor.py

from types import SimpleNamespace

import pytest

from core.exceptions import PersistenceError, ValidationError
from modules.tables.floor_plan.editor import (
    CHANGE_ROOM_PROMPT,
    FloorPlanEditor,
    NO_CHANGES_MESSAGE,
    SAVE_BEFORE_EXIT_PROMPT,
    SAVE_SUCCESS_MESSAGE,
)
from modules.tables.floor_plan.element import EditTool


def make_table(table_id, x=0, y=0, width=100, height=100, rotation=0, room_id=1):
    return SimpleNamespace(
        id=table_id,
        table_number=f"T{table_id}",
        capacity=4,
        status="available",
        shape="rectangle",
        room_id=room_id,
        position_x=x,
        position_y=y,
        width=width,
        height=height,
        rotation=rotation,
    )


class RecordingConfirm:
    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


class TestFloorPlanEditor:
    """Edit mode, tools and dirty tracking"""

    @pytest.fixture
    def editor(self) -> FloorPlanEditor:
        return FloorPlanEditor([make_table(1, 10, 10), make_table(2, 200, 10)], room_id=1)

    @pytest.fixture
    def saved(self):
        return {}

    @pytest.fixture
    def persist(self, saved):
        def _persist(table_id, changes):
            saved[table_id] = changes
        return _persist

    def drag(self, editor, table_id, dx, dy):
        editor.set_tool(EditTool.MOVE)
        editor.press_table(table_id, 0, 0)
        editor.move_pointer(dx, dy)
        editor.release_pointer()

    def test_enter_edit_mode_resets_tool_and_selection(self, editor):
        """Test entering edit mode selects the select tool and clears selection"""
        editor.press_table(1)
        assert editor.selected_table_id == 1

        editor.enter_edit_mode()
        editor.set_tool(EditTool.ROTATE)
        editor.press_table(2)
        editor.enter_edit_mode()

        assert editor.is_editing
        assert editor.tool == EditTool.SELECT
        assert editor.selected_table_id is None

    def test_tools_require_edit_mode(self, editor):
        """Test editing tools are gated behind edit mode"""
        with pytest.raises(ValidationError):
            editor.set_tool(EditTool.MOVE)
        with pytest.raises(ValidationError):
            editor.rotate_table(1)

        editor.set_tool(EditTool.SELECT)
        assert editor.tool == EditTool.SELECT

    def test_press_outside_edit_mode_only_selects(self, editor):
        editor.press_table(1, 0, 0)
        editor.move_pointer(50, 50)

        assert editor.selected_table_id == 1
        assert not editor.has_unsaved_changes

    def test_drag_marks_table_modified(self, editor):
        """Test a drag is tracked against the saved position"""
        editor.enter_edit_mode()
        self.drag(editor, 1, 15, 5)

        assert editor.modified_tables == {1: {"position_x": 25, "position_y": 15}}
        assert editor.has_unsaved_changes

    def test_moving_back_leaves_nothing_to_save(self, editor):
        """Test changes are measured against persisted values, not edit history"""
        editor.enter_edit_mode()
        self.drag(editor, 1, 15, 5)
        self.drag(editor, 1, -15, -5)

        assert editor.modified_tables == {}
        assert not editor.has_unsaved_changes

    def test_eight_rotations_are_not_a_change(self, editor):
        editor.enter_edit_mode()
        for _ in range(8):
            editor.rotate_table(2)

        assert not editor.has_unsaved_changes

    def test_size_updates_are_clamped(self, editor):
        """Test direct size updates respect the minimum table size"""
        editor.update_table_size(1, 10, -5)

        layout = editor.elements[1].layout
        assert (layout.width, layout.height) == (50, 50)
        assert editor.modified_tables == {1: {"width": 50, "height": 50}}

    def test_rotation_updates_wrap(self, editor):
        editor.update_table_rotation(1, 405)
        assert editor.elements[1].rotation == 45

    def test_exit_without_changes_does_not_prompt(self, editor):
        """Test leaving edit mode with no changes never asks"""
        confirm = RecordingConfirm(True)
        editor.enter_edit_mode()

        assert editor.exit_edit_mode(confirm) is False
        assert confirm.prompts == []
        assert not editor.is_editing

    def test_exit_confirm_saves_then_exits(self, editor, persist, saved):
        """Test accepting the prompt saves every modified table and exits"""
        confirm = RecordingConfirm(True)
        editor.enter_edit_mode()
        editor.set_tool(EditTool.RESIZE)
        editor.press_table(2, 0, 0)
        editor.move_pointer(30, -80)
        editor.release_pointer()

        assert editor.exit_edit_mode(confirm, persist) is True
        assert confirm.prompts == [SAVE_BEFORE_EXIT_PROMPT]
        assert saved == {2: {"width": 130, "height": 50}}
        assert not editor.is_editing
        assert not editor.has_unsaved_changes
        assert editor.last_message == SAVE_SUCCESS_MESSAGE

    def test_exit_decline_reverts_and_exits(self, editor, persist, saved):
        """Test declining the prompt exits and restores the saved layout"""
        confirm = RecordingConfirm(False)
        editor.enter_edit_mode()
        self.drag(editor, 1, 40, 40)

        assert editor.exit_edit_mode(confirm, persist) is False
        assert confirm.prompts == [SAVE_BEFORE_EXIT_PROMPT]
        assert saved == {}
        assert not editor.is_editing
        assert not editor.has_unsaved_changes
        assert editor.elements[1].layout.position_x == 10

    def test_failed_save_stays_in_edit_mode(self, editor):
        """Test a persist failure keeps edit mode and the unsaved changes"""
        def failing_persist(table_id, changes):
            if table_id == 2:
                raise RuntimeError("connection lost")

        editor.enter_edit_mode()
        self.drag(editor, 1, 5, 5)
        self.drag(editor, 2, 5, 5)

        with pytest.raises(PersistenceError):
            editor.exit_edit_mode(RecordingConfirm(True), failing_persist)

        assert editor.is_editing
        assert list(editor.modified_tables) == [2]

    def test_save_without_changes(self, editor, persist, saved):
        assert editor.save_changes(persist) == 0
        assert editor.last_message == NO_CHANGES_MESSAGE
        assert saved == {}

    def test_save_rebaselines_tables(self, editor, persist):
        editor.enter_edit_mode()
        self.drag(editor, 1, 5, 0)

        assert editor.save_changes(persist) == 1
        assert not editor.has_unsaved_changes
        assert editor.is_editing

    def test_change_room_declined_keeps_state(self, editor):
        """Test a declined room change keeps the room and the changes"""
        confirm = RecordingConfirm(False)
        editor.enter_edit_mode()
        self.drag(editor, 1, 5, 5)

        changed = editor.change_room(2, [make_table(9, room_id=2)], confirm)

        assert changed is False
        assert confirm.prompts == [CHANGE_ROOM_PROMPT]
        assert editor.room_id == 1
        assert editor.has_unsaved_changes

    def test_change_room_loads_new_tables(self, editor):
        confirm = RecordingConfirm(True)
        editor.press_table(1)

        assert editor.change_room(2, [make_table(9, room_id=2)], confirm)
        assert confirm.prompts == []
        assert editor.room_id == 2
        assert list(editor.elements) == [9]
        assert editor.selected_table_id is None

    def test_unknown_table_raises_key_error(self, editor):
        with pytest.raises(KeyError):
            editor.press_table(404)

    def test_snapshot(self, editor):
        editor.enter_edit_mode()
        self.drag(editor, 2, 1, 1)

        snapshot = editor.snapshot()
        assert snapshot["is_editing"] is True
        assert snapshot["tool"] == "move"
        assert snapshot["modified_table_ids"] == [2]
        assert snapshot["tables"][1]["position_x"] == 201
        assert snapshot["tables"][1]["table_number"] == "T2"
