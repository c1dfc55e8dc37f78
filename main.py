"""
FastAPI Application Entry Point

Integrates:
  - AI routes (chat, RAG, models, persona chat, audio analysis)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as ai_router
from config import Config

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Dwight AI gateway starting up...")
    logger.info(f"Ollama: {Config.OLLAMA_BASE_URL}")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"LLM Backend: {Config.LLM_BACKEND}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Dwight AI gateway shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Dwight AI Gateway",
    description="Resilient access to a local inference server",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(ai_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    problems = Config.problems()
    if problems:
        return {"status": "not_ready", "reason": "; ".join(problems)}
    return {"status": "ready"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Dwight AI Gateway",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "chat": "POST /ai/chat",
            "rag": "POST /ai/rag",
            "models": "GET /ai/models",
            "dwight": "POST /ai/dwight",
            "audio_analysis": "POST /ai/audio-analysis",
            "ai_health": "GET /ai/health",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


@app.get("/config/info")
async def config_info():
    """Get non-sensitive configuration info."""
    return {
        "environment": Config.ENVIRONMENT,
        "llm_backend": Config.LLM_BACKEND,
        "ollama_base_url": Config.OLLAMA_BASE_URL,
        "agent_port": Config.AGENT_PORT,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=Config.AGENT_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
