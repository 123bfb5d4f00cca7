from fastapi import FastAPI
import logging

from mealpack.api.state import get_state
from mealpack.utilities.validators import SettingsInput, filters_dict

# Routers
from mealpack.api.routes import orders, reports, export

# Logging
logger = logging.getLogger("mealpack_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Orders & Packing API")

# Include routers
app.include_router(orders.router)
app.include_router(reports.router)
app.include_router(export.router)


@app.on_event("startup")
def _startup_state():
    """Load persisted settings so the first upload is computed under the saved policy."""
    state = get_state()
    logger.info(f"Order book ready (allow_overage={state.book.allow_overage})")


@app.get("/api/health")
def health():
    state = get_state()
    return {"status": "ok", "rows": len(state.book), "allow_overage": state.book.allow_overage}


# -------------------- API: Settings --------------------
@app.get("/api/settings")
def get_settings():
    return get_state().settings()


@app.put("/api/settings")
def put_settings(payload: SettingsInput):
    """Persist the settings; changing allow_overage recomputes every loaded row."""
    state = get_state()
    filters = filters_dict(payload.filters) if payload.filters is not None else None
    previous = state.book.allow_overage
    state.update_settings(payload.allow_overage, filters)
    if previous != state.book.allow_overage:
        logger.info(f"Overage policy changed to {state.book.allow_overage}; {len(state.book)} rows recomputed")
    return state.settings()
