from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Language(str, Enum):
    UZ = "UZ"
    EN = "EN"
    RU = "RU"


class InputKind(str, Enum):
    DOCUMENT = "document"
    YOUTUBE = "youtube"


LANGUAGE_LABELS = {
    Language.UZ: "Uzbek",
    Language.EN: "English",
    Language.RU: "Russian",
}


class ClipboardPayload(BaseModel):
    """What the browser read from its clipboard, or the DOMException name it got."""

    text: Optional[str] = None
    error: Optional[str] = None


class ClipboardRequest(ClipboardPayload):
    """Clipboard outcome plus the textarea as it stood when the user clicked paste."""

    draft: Optional[str] = None


class SessionStateOut(BaseModel):
    text: str
    language: Language
    input_kind: InputKind
    extended_reasoning: bool
    processing: bool
    error: Optional[str] = None
    has_deck: bool
    cursor: Optional[int] = None
