"""
main.py - FastAPI application entrypoint for the MindMate AI server

Purpose:
- Exposes the AI feature endpoints (journal analysis, mood insights, chat,
  health advice, mental-peace techniques, daily tip) under /api/ai.
- Builds the provider list and the AI orchestrator once at startup from
  environment configuration; request handlers only read them.
- Provides a small health endpoint reporting which AI providers are configured.

Design/behavioral notes:
- The server stores nothing: journal entries, moods and chat history live on
  the client and are sent with each request.
- AI failures never become error responses. When no provider answers, the
  endpoints return pre-written fallback content with a 200.
"""

import os
import logging
from datetime import datetime

from fastapi import Depends, FastAPI

from .config import load_settings, resolve_log_level
from .orchestrator import AIOrchestrator, build_orchestrator
from . import routes

# Configure logging (configurable via LOG_LEVEL env var)
LOG_LEVEL = resolve_log_level(os.environ.get("LOG_LEVEL"))
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
_logger = logging.getLogger(__name__)

# FastAPI app and routers
app = FastAPI(title="MindMate AI")
app.include_router(routes.router, prefix="/api/ai")


# -------------------------
# Startup event
# -------------------------
@app.on_event("startup")
async def startup_event():
    """
    App startup hook:
    - Loads settings (environment + .env) and builds the orchestrator.
    """
    _logger.info("MindMate AI starting up")
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    app.state.settings = settings
    app.state.orchestrator = build_orchestrator(settings)


@app.get("/health")
async def health_check(orchestrator: AIOrchestrator = Depends(routes.get_orchestrator)):
    """Report service status and the AI providers eligible for generation."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "providers_available": orchestrator.provider_names(),
    }


# -------------------------
# Run with Uvicorn when executed directly
# -------------------------
if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("mindmate.main:app", host="0.0.0.0", port=port)
