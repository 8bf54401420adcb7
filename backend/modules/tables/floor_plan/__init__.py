from .element import EditTool, TableElement, TableLayout, ROTATION_STEP
from .editor import FloorPlanEditor
from .sessions import EditorSession, EditorSessionStore

__all__ = [
    "EditTool", "TableElement", "TableLayout", "ROTATION_STEP",
    "FloorPlanEditor", "EditorSession", "EditorSessionStore",
]
