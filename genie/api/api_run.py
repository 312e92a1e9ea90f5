from fastapi import FastAPI, Query
from typing import Optional
import logging

from genie.api.context import build_context
from genie.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from genie.api.routes import grocery, meal_plan, settings

# Logging
logger = logging.getLogger("genie_app")

# Initialize FastAPI app
app = FastAPI(title="Genie Grocery List & Settings API")
app.state.genie = build_context()

# Include routers
app.include_router(grocery.router)
app.include_router(meal_plan.router)
app.include_router(settings.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers(app.state.genie.event_bus)
    logger.info("Web observers for grocery events started")


# -------------------- API: Grocery events (polled by frontend) --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    return get_web_events(since)


@app.get('/health')
def health():
    return {"status": "ok"}
