# backend/modules/tables/floor_plan/sessions.py

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from core.exceptions import ConflictError, NotFoundError
from .editor import FloorPlanEditor

logger = logging.getLogger(__name__)


@dataclass
class EditorSession:
    session_id: str
    editor: FloorPlanEditor
    opened_at: datetime = field(default_factory=datetime.utcnow)
    last_activity: datetime = field(default_factory=datetime.utcnow)

    def touch(self) -> None:
        self.last_activity = datetime.utcnow()


class EditorSessionStore:
    """Open floor plan editors, keyed by session id"""

    def __init__(self, limit: int = 50):
        self.limit = limit
        self._sessions: Dict[str, EditorSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, editor: FloorPlanEditor) -> EditorSession:
        if len(self._sessions) >= self.limit:
            self._evict_idle()
        if len(self._sessions) >= self.limit:
            raise ConflictError(
                "Too many floor plan editors are open", error_code="EDITOR_LIMIT_REACHED"
            )

        session = EditorSession(session_id=uuid.uuid4().hex, editor=editor)
        self._sessions[session.session_id] = session
        logger.info(f"Opened floor plan editor {session.session_id} for room {editor.room_id}")
        return session

    def get(self, session_id: str) -> EditorSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError("Floor plan editor session not found")
        session.touch()
        return session

    def close(self, session_id: str) -> Optional[EditorSession]:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise NotFoundError("Floor plan editor session not found")
        if session.editor.has_unsaved_changes:
            logger.warning(f"Closed floor plan editor {session_id} with unsaved changes")
        return session

    def clear(self) -> None:
        self._sessions.clear()

    def _evict_idle(self) -> None:
        # Only editors without unsaved work are safe to drop
        idle = [
            s for s in self._sessions.values()
            if not s.editor.is_editing and not s.editor.has_unsaved_changes
        ]
        if idle:
            oldest = min(idle, key=lambda s: s.last_activity)
            del self._sessions[oldest.session_id]
            logger.info(f"Evicted idle floor plan editor {oldest.session_id}")
