from __future__ import annotations

import logging
from typing import Awaitable, BinaryIO, Callable, Optional, Protocol

from ..schemas.deck import Deck
from ..schemas.session import ClipboardPayload, InputKind, Language, SessionStateOut
from .ai import generate_presentation
from .errors import ClipboardError, FileTypeError, SlidecraftError, ValidationError
from .viewer import SlideViewer

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {"txt"}
OFFICE_EXTENSIONS = {"pdf", "doc", "docx"}

Generator = Callable[[str, Language, InputKind, bool], Awaitable[Deck]]


class ClipboardReader(Protocol):
    async def read(self) -> str: ...


class BrowserClipboard:
    """
    Clipboard reads happen in the browser; this replays the outcome it posted back.
    DOMException names map onto ClipboardError kinds.
    """

    def __init__(self, payload: ClipboardPayload):
        self.payload = payload

    async def read(self) -> str:
        if self.payload.error == "NotAllowedError":
            raise ClipboardError(ClipboardError.NOT_ALLOWED)
        if self.payload.error:
            raise ClipboardError(ClipboardError.NOT_SUPPORTED)
        return self.payload.text or ""


class AppStateController:
    """
    All state of one browser session: the input form, the in-flight flag,
    the error slot and the current deck with its viewer.
    """

    def __init__(self, generate: Optional[Generator] = None):
        self._generate = generate
        self._generation = 0
        self.processing = False
        self.reset()

    def reset(self) -> None:
        # A call still in flight keeps the busy flag; its result is dropped on return
        self._generation += 1
        self.text = ""
        self.language = Language.EN
        self.input_kind = InputKind.DOCUMENT
        self.extended_reasoning = False
        self.error: Optional[str] = None
        self.deck: Optional[Deck] = None
        self.viewer: Optional[SlideViewer] = None

    # --- plain field updates ---

    def set_text(self, text: str) -> None:
        self.text = text
        self.error = None

    def set_language(self, language: Language | str) -> None:
        self.language = Language(language)
        self.error = None

    def set_input_kind(self, input_kind: InputKind | str) -> None:
        self.input_kind = InputKind(input_kind)
        self.error = None

    def toggle_extended_reasoning(self) -> None:
        self.extended_reasoning = not self.extended_reasoning

    def _fail(self, exc: SlidecraftError) -> None:
        logger.warning("%s: %s", type(exc).__name__, exc.message)
        self.error = exc.message

    # --- input sources ---

    async def paste_from_clipboard(self, reader: ClipboardReader) -> None:
        try:
            text = await reader.read()
            if not text:
                raise ClipboardError(ClipboardError.EMPTY)
        except ClipboardError as e:
            self._fail(e)
            return
        self.set_text(text)

    def load_file(self, filename: str, stream: BinaryIO) -> None:
        if not filename:
            return
        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        try:
            if extension in OFFICE_EXTENSIONS:
                raise FileTypeError(FileTypeError.EXTRACTION_RESTRICTED, extension)
            if extension not in TEXT_EXTENSIONS:
                raise FileTypeError(FileTypeError.UNSUPPORTED, extension)
        except FileTypeError as e:
            self._fail(e)
            return
        self.set_text(stream.read().decode("utf-8", errors="replace"))

    # --- generation ---

    async def submit(self) -> None:
        if self.processing:
            logger.info("Submit ignored: a generation is already in flight")
            return
        if not self.text.strip():
            self._fail(ValidationError())
            return

        self._generation += 1
        token = self._generation
        self.processing = True
        self.error = None
        self.deck = None
        self.viewer = None
        generate = self._generate or generate_presentation
        try:
            deck = await generate(self.text, self.language, self.input_kind, self.extended_reasoning)
        except SlidecraftError as e:
            if token == self._generation:
                self._fail(e)
            return
        finally:
            self.processing = False
        if token != self._generation:
            logger.info("Dropping generation result: session was reset while it ran")
            return
        self.load_deck(deck)

    def load_deck(self, deck: Deck) -> None:
        self.deck = deck
        self.viewer = SlideViewer(deck, on_dismiss=self.reset)

    def snapshot(self) -> SessionStateOut:
        return SessionStateOut(
            text=self.text,
            language=self.language,
            input_kind=self.input_kind,
            extended_reasoning=self.extended_reasoning,
            processing=self.processing,
            error=self.error,
            has_deck=self.deck is not None,
            cursor=self.viewer.cursor if self.viewer else None,
        )
