"""Process bootstrap: logging and database schema."""

import asyncio
import logging

from conduit.config import get_settings
from conduit.infrastructure.database import init_database
from conduit.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


async def bootstrap() -> None:
    """Prepare the process: configure logging, then create missing tables."""
    settings = get_settings()
    setup_logging()
    await init_database()
    logger.info("%s %s ready (env=%s)", settings.app_title, settings.app_version, settings.app_env)


if __name__ == "__main__":
    asyncio.run(bootstrap())
