"""
Application startup logging.

Configures the root logger and reports how the application was
configured before it starts serving requests.
"""

import logging

from core.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Configure logging for the application process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def log_startup(settings: Settings):
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"Environment: {settings.environment}")
    logger.info("=" * 60)

    if settings.is_production and settings.database_url.startswith("sqlite"):
        logger.warning("Running in production on SQLite - configure DATABASE_URL")
    if settings.is_production and settings.debug:
        logger.warning("Debug mode is enabled in production")
