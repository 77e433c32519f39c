"""Playlist Watch Time - FastAPI Application."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import ErrorKind, PlaylistInfoError
from app.routers import playlist_info

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Create app
app = FastAPI(
    title=settings.app_name,
    description="Total and average watch time of YouTube playlists",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(playlist_info.router)


@app.exception_handler(PlaylistInfoError)
async def playlist_info_error_handler(request: Request, exc: PlaylistInfoError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} ({exc.kind.value}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are reported as invalid input, in the same {"error": ...} shape."""
    if any("playlistUrl" in err.get("loc", ()) for err in exc.errors()):
        message = "Playlist URL is required."
    else:
        message = "Invalid request body."
    status_code = 400
    logger.info(f"{request.method} {request.url.path} -> {status_code} ({ErrorKind.INVALID_INPUT.value}): {message}")
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "description": "Playlist watch time calculator",
        "docs": "/docs",
        "endpoints": {
            "playlist-info": "POST /api/playlist-info - Total and average watch time of a playlist",
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8765)
