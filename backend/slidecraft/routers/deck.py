from fastapi import APIRouter, HTTPException, status

from ..schemas.deck import DeckOut, ExportPanelOut, GenerateRequest
from ..services.ai import FormatError, ServiceError, generate_presentation, select_model
from ..services.errors import ValidationError
from ..services.export import export_panel

router = APIRouter()


@router.post("", response_model=DeckOut, status_code=status.HTTP_201_CREATED)
async def generate_deck(payload: GenerateRequest):
    if not payload.text.strip():
        raise HTTPException(status_code=422, detail=ValidationError().message)

    try:
        deck = await generate_presentation(
            payload.text,
            payload.language,
            payload.input_kind,
            payload.extended_reasoning,
        )
    except ServiceError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except FormatError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return {
        "title": deck.title,
        "slides": deck.slides,
        "model": select_model(payload.extended_reasoning),
    }


@router.get("/export-template", response_model=ExportPanelOut)
def get_export_template():
    return export_panel()
