# backend/core/app_context.py

"""
Application context.

Holds the resources that live for as long as the application runs: the
database engine, the session factory and the open floor-plan editor
sessions. It is created once at the composition root, initialised when the
application starts and torn down when it stops.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import Settings
from .database import Base, build_engine, build_session_factory
from modules.tables.floor_plan.sessions import EditorSessionStore

logger = logging.getLogger(__name__)


class AppContext:
    """Lifecycle owner for shared application resources"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None
        self.editor_sessions: Optional[EditorSessionStore] = None

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def init(self) -> "AppContext":
        if self.is_initialized:
            raise RuntimeError("Application context is already initialized")

        self.engine = build_engine(self.settings.database_url, echo=self.settings.sql_echo)
        self.session_factory = build_session_factory(self.engine)
        self.editor_sessions = EditorSessionStore(limit=self.settings.editor_session_limit)

        if self.settings.create_tables_on_startup:
            Base.metadata.create_all(bind=self.engine)

        logger.info(
            f"Application context initialized ({self.settings.environment}, "
            f"{self.engine.url.get_backend_name()})"
        )
        return self

    def new_session(self) -> Session:
        if self.session_factory is None:
            raise RuntimeError("Application context is not initialized")
        return self.session_factory()

    def teardown(self) -> None:
        if not self.is_initialized:
            return

        open_sessions = len(self.editor_sessions)
        self.editor_sessions.clear()
        self.engine.dispose()

        self.engine = None
        self.session_factory = None
        self.editor_sessions = None
        logger.info(f"Application context torn down ({open_sessions} editor sessions closed)")
