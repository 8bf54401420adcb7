from .finance_routes import router as finance_router

__all__ = ["finance_router"]
