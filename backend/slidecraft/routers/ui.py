import os
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..schemas.session import LANGUAGE_LABELS, ClipboardRequest, InputKind, Language, SessionStateOut
from ..services.session import AppStateController, BrowserClipboard
from ..sessions import get_controller

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter()


def _back(request: Request) -> RedirectResponse:
    return RedirectResponse(url=request.url_for("index"), status_code=status.HTTP_303_SEE_OTHER)


def _apply_text(c: AppStateController, text: Optional[str]) -> None:
    # Every form carries the textarea so toggles never drop unsent edits
    if text is not None and text != c.text:
        c.set_text(text)


@router.get("/", response_class=HTMLResponse, name="index")
def index(request: Request, c: AppStateController = Depends(get_controller)):
    viewer = c.viewer
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": c,
            "viewer": viewer,
            "languages": LANGUAGE_LABELS,
            "input_kinds": list(InputKind),
            "panel": viewer.export_panel() if viewer and viewer.export_open else None,
        },
    )


# --- input form ---

@router.post("/text")
def set_text(request: Request, text: str = Form(""), c: AppStateController = Depends(get_controller)):
    c.set_text(text)
    return _back(request)


@router.post("/language")
def set_language(
    request: Request,
    language: Language = Form(...),
    text: Optional[str] = Form(None),
    c: AppStateController = Depends(get_controller),
):
    _apply_text(c, text)
    c.set_language(language)
    return _back(request)


@router.post("/input-kind")
def set_input_kind(
    request: Request,
    input_kind: InputKind = Form(...),
    text: Optional[str] = Form(None),
    c: AppStateController = Depends(get_controller),
):
    _apply_text(c, text)
    c.set_input_kind(input_kind)
    return _back(request)


@router.post("/reasoning")
def toggle_reasoning(
    request: Request,
    text: Optional[str] = Form(None),
    c: AppStateController = Depends(get_controller),
):
    _apply_text(c, text)
    c.toggle_extended_reasoning()
    return _back(request)


@router.post("/clipboard", response_model=SessionStateOut)
async def paste_clipboard(payload: ClipboardRequest, c: AppStateController = Depends(get_controller)):
    _apply_text(c, payload.draft)
    await c.paste_from_clipboard(BrowserClipboard(payload))
    return c.snapshot()


@router.post("/upload")
def upload(
    request: Request,
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    c: AppStateController = Depends(get_controller),
):
    _apply_text(c, text)
    if file is not None:
        c.load_file(file.filename or "", file.file)
    return _back(request)


@router.post("/generate")
async def generate(
    request: Request,
    text: Optional[str] = Form(None),
    c: AppStateController = Depends(get_controller),
):
    _apply_text(c, text)
    await c.submit()
    return _back(request)


@router.post("/reset")
def reset(request: Request, c: AppStateController = Depends(get_controller)):
    c.reset()
    return _back(request)


# --- viewer ---

@router.post("/slides/next")
def next_slide(request: Request, c: AppStateController = Depends(get_controller)):
    if c.viewer:
        c.viewer.next()
    return _back(request)


@router.post("/slides/prev")
def prev_slide(request: Request, c: AppStateController = Depends(get_controller)):
    if c.viewer:
        c.viewer.prev()
    return _back(request)


@router.post("/slides/export")
def open_export(request: Request, c: AppStateController = Depends(get_controller)):
    if c.viewer:
        c.viewer.open_export()
    return _back(request)


@router.post("/slides/export/close")
def close_export(request: Request, c: AppStateController = Depends(get_controller)):
    if c.viewer:
        c.viewer.close_export()
    return _back(request)


@router.post("/slides/dismiss")
def dismiss(request: Request, c: AppStateController = Depends(get_controller)):
    if c.viewer:
        c.viewer.dismiss()
    return _back(request)
