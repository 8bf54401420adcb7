from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.startup import configure_logging, log_startup
from core.app_context import AppContext
from core.config import Settings, get_settings
from core.exceptions import register_exception_handlers

# ========== Tables & Floor Plan ==========
from modules.tables import room_router, table_router, floor_plan_router

# ========== Menu ==========
from modules.menu.routes import menu_router

# ========== Inventory ==========
from modules.inventory.routes.inventory_routes import router as inventory_router

# ========== Staff ==========
from modules.staff.routes.staff_routes import router as staff_router
from modules.staff.routes.attendance_routes import router as attendance_router

# ========== Finance ==========
from modules.finance.routes import finance_router

# ========== Navigation ==========
from modules.navigation.routes.navigation_routes import router as navigation_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_startup(settings)
        context = AppContext(settings).init()
        app.state.context = context
        try:
            yield
        finally:
            context.teardown()

    app = FastAPI(
        title=settings.app_name,
        description="""
    Restaurant back-office API.

    ## Features

    * **Floor Plan** - Rooms, tables and the drag/resize/rotate layout editor
    * **Menu Management** - Food items, categories and modifier groups
    * **Inventory Management** - Stock levels, adjustments, waste and history
    * **Staff Management** - Staff directory and attendance
    * **Finance** - Expenses, expense categories and reports
    """,
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Register exception handlers for consistent error responses
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(room_router)
    app.include_router(table_router)
    app.include_router(floor_plan_router)
    app.include_router(menu_router)
    app.include_router(inventory_router)
    app.include_router(staff_router)
    app.include_router(attendance_router, prefix="/staff")
    app.include_router(finance_router)
    app.include_router(navigation_router)

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
