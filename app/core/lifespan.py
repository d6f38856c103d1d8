from contextlib import asynccontextmanager
import json
import logging

from app.ai.degrading import capability_usable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    state = app.state.portfolio
    logger.info(
        json.dumps(
            {
                "event": "startup",
                "ai_capability": type(state.capability).__name__ if state.capability else None,
                "ai_usable": capability_usable(state.capability),
                "catalog_items": len(state.catalog),
            }
        )
    )
    yield
    logger.info(json.dumps({"event": "shutdown"}))
