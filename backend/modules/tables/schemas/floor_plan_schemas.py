# backend/modules/tables/schemas/floor_plan_schemas.py

from typing import List, Optional
from pydantic import BaseModel, Field

from ..floor_plan.element import EditTool


class EditorOpenRequest(BaseModel):
    """Open a floor plan editor; without a room the first active room is used"""

    room_id: Optional[int] = None
    all_rooms: bool = Field(False, description="Show every table instead of a single room")


class ToolChange(BaseModel):
    tool: EditTool


class PointerEvent(BaseModel):
    x: int
    y: int


class PointerDown(PointerEvent):
    table_id: int


class ExitEditRequest(BaseModel):
    save: Optional[bool] = Field(
        None,
        description="Answer to the save prompt; required when there are unsaved changes",
    )


class ChangeRoomRequest(BaseModel):
    room_id: Optional[int] = None
    discard_changes: bool = False


class EditorTable(BaseModel):
    id: int
    table_number: str
    capacity: Optional[int] = None
    status: Optional[str] = None
    shape: Optional[str] = None
    room_id: Optional[int] = None
    position_x: int
    position_y: int
    width: int
    height: int
    rotation: int


class EditorState(BaseModel):
    session_id: str
    room_id: Optional[int] = None
    room_name: str
    is_editing: bool
    tool: EditTool
    selected_table_id: Optional[int] = None
    has_unsaved_changes: bool
    modified_table_ids: List[int] = []
    message: Optional[str] = None
    tables: List[EditorTable] = []
