# backend/modules/tables/routers/floor_plan_router.py

from fastapi import APIRouter, Depends, Request, status
from core.exceptions import ConflictError
from ..floor_plan.editor import (
    FloorPlanEditor,
    SAVE_BEFORE_EXIT_PROMPT,
    CHANGE_ROOM_PROMPT,
)
from ..floor_plan.sessions import EditorSession, EditorSessionStore
from ..schemas.floor_plan_schemas import (
    EditorOpenRequest, EditorState, ToolChange,
    PointerDown, PointerEvent, ExitEditRequest, ChangeRoomRequest,
)
from ..services.room_service import RoomService
from ..services.table_service import TableService, room_display_name
from .room_router import get_room_service
from .table_router import get_table_service

router = APIRouter(prefix="/floor-plan", tags=["Floor Plan"])


def get_editor_sessions(request: Request) -> EditorSessionStore:
    """Editor sessions live on the application context"""
    return request.app.state.context.editor_sessions


def _state(session: EditorSession, room_service: RoomService) -> EditorState:
    snapshot = session.editor.snapshot()
    return EditorState(
        session_id=session.session_id,
        room_name=room_display_name(snapshot["room_id"], room_service.list_rooms()),
        **snapshot,
    )


@router.post("/sessions", response_model=EditorState, status_code=status.HTTP_201_CREATED)
async def open_editor(
    open_request: EditorOpenRequest,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    table_service: TableService = Depends(get_table_service),
    room_service: RoomService = Depends(get_room_service),
):
    """
    Open a floor plan editor for a room

    Without a room the first active room (by name) is used.
    """
    room_id = open_request.room_id
    if room_id is not None:
        room_service.get_room(room_id)
    elif not open_request.all_rooms:
        active_rooms = room_service.list_rooms(active_only=True)
        room_id = active_rooms[0].id if active_rooms else None

    editor = FloorPlanEditor(table_service.list_tables(room_id), room_id=room_id)
    return _state(sessions.open(editor), room_service)


@router.get("/sessions/{session_id}", response_model=EditorState)
async def get_editor(
    session_id: str,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    """Get the current editor state"""
    return _state(sessions.get(session_id), room_service)


@router.post("/sessions/{session_id}/edit", response_model=EditorState)
async def enter_edit_mode(
    session_id: str,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    """Enter edit mode: tool resets to select and the selection is cleared"""
    session = sessions.get(session_id)
    session.editor.enter_edit_mode()
    return _state(session, room_service)


@router.post("/sessions/{session_id}/exit", response_model=EditorState)
async def exit_edit_mode(
    session_id: str,
    exit_request: ExitEditRequest,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    table_service: TableService = Depends(get_table_service),
    room_service: RoomService = Depends(get_room_service),
):
    """
    Leave edit mode

    With unsaved changes the client must answer the save prompt:
    ``save=true`` saves then exits, ``save=false`` discards and exits.
    Without an answer the request is rejected with 409.
    """
    session = sessions.get(session_id)
    editor = session.editor
    if editor.has_unsaved_changes and exit_request.save is None:
        raise ConflictError(SAVE_BEFORE_EXIT_PROMPT, error_code="UNSAVED_CHANGES")

    editor.exit_edit_mode(
        confirm=lambda _prompt: bool(exit_request.save),
        persist=table_service.save_layout,
    )
    return _state(session, room_service)


@router.put("/sessions/{session_id}/tool", response_model=EditorState)
async def set_tool(
    session_id: str,
    tool_change: ToolChange,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    session = sessions.get(session_id)
    session.editor.set_tool(tool_change.tool)
    return _state(session, room_service)


@router.post("/sessions/{session_id}/pointer/down", response_model=EditorState)
async def pointer_down(
    session_id: str,
    event: PointerDown,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    """Press on a table with the active tool"""
    session = sessions.get(session_id)
    session.editor.press_table(event.table_id, event.x, event.y)
    return _state(session, room_service)


@router.post("/sessions/{session_id}/pointer/move", response_model=EditorState)
async def pointer_move(
    session_id: str,
    event: PointerEvent,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    session = sessions.get(session_id)
    session.editor.move_pointer(event.x, event.y)
    return _state(session, room_service)


@router.post("/sessions/{session_id}/pointer/up", response_model=EditorState)
async def pointer_up(
    session_id: str,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    session = sessions.get(session_id)
    session.editor.release_pointer()
    return _state(session, room_service)


@router.post("/sessions/{session_id}/tables/{table_id}/rotate", response_model=EditorState)
async def rotate_table(
    session_id: str,
    table_id: int,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    room_service: RoomService = Depends(get_room_service),
):
    """Rotate a table by 45 degrees"""
    session = sessions.get(session_id)
    session.editor.rotate_table(table_id)
    return _state(session, room_service)


@router.post("/sessions/{session_id}/save", response_model=EditorState)
async def save_changes(
    session_id: str,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    table_service: TableService = Depends(get_table_service),
    room_service: RoomService = Depends(get_room_service),
):
    """Persist every modified table"""
    session = sessions.get(session_id)
    session.editor.save_changes(table_service.save_layout)
    return _state(session, room_service)


@router.post("/sessions/{session_id}/room", response_model=EditorState)
async def change_room(
    session_id: str,
    room_request: ChangeRoomRequest,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
    table_service: TableService = Depends(get_table_service),
    room_service: RoomService = Depends(get_room_service),
):
    """
    Show another room

    Unsaved changes are only discarded when ``discard_changes`` is set.
    """
    session = sessions.get(session_id)
    if room_request.room_id is not None:
        room_service.get_room(room_request.room_id)

    changed = session.editor.change_room(
        room_request.room_id,
        table_service.list_tables(room_request.room_id),
        confirm=lambda _prompt: room_request.discard_changes,
    )
    if not changed:
        raise ConflictError(CHANGE_ROOM_PROMPT, error_code="UNSAVED_CHANGES")
    return _state(session, room_service)


@router.delete("/sessions/{session_id}")
async def close_editor(
    session_id: str,
    sessions: EditorSessionStore = Depends(get_editor_sessions),
):
    sessions.close(session_id)
    return {"success": True, "message": "Floor plan editor closed"}
