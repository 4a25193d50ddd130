from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .session import InputKind, Language


class Slide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    bullets: List[str]


class Deck(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    slides: List[Slide] = Field(min_length=1)


class GenerateRequest(BaseModel):
    text: str
    language: Language = Language.EN
    input_kind: InputKind = InputKind.DOCUMENT
    extended_reasoning: bool = False


class DeckOut(BaseModel):
    title: str
    slides: List[Slide]
    model: str


class ExportPanelOut(BaseModel):
    prompt: str
    api_schema: str
