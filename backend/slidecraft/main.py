import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .config import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

app = FastAPI(title="Slidecraft")

# --- CORS ---
origins = settings.ALLOWED_ORIGINS.split(",") if settings.ALLOWED_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Per-browser session cookie ---
app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET, session_cookie="slidecraft_session")

# --- Paths ---
BASE_DIR = os.path.dirname(__file__)
STATIC_DIR = os.path.join(BASE_DIR, "static")

# --- Static mounts ---
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# --- Routers ---
from .routers import ui as ui_router
from .routers import deck as deck_router

app.include_router(ui_router.router, tags=["ui"])
app.include_router(deck_router.router, prefix="/api/decks", tags=["decks"])


@app.get("/healthz", tags=["meta"])
def healthz():
    return {"status": "ok"}
