"""Fixed reference material shown in the viewer's developer export panel.

Nothing here is executed: the script is a template users run themselves
against the JSON this app produces.
"""
import json

PPTX_GENERATION_PROMPT = '''\
# pip install python-pptx
import json
import sys

from pptx import Presentation
from pptx.util import Pt


def build_pptx(deck: dict, out_path: str) -> None:
    prs = Presentation()

    title_slide = prs.slides.add_slide(prs.slide_layouts[0])
    title_slide.shapes.title.text = deck["title"]

    for slide in deck["slides"]:
        s = prs.slides.add_slide(prs.slide_layouts[1])
        s.shapes.title.text = slide["title"]
        body = s.placeholders[1].text_frame
        body.clear()
        for i, bullet in enumerate(slide["bullets"]):
            p = body.paragraphs[0] if i == 0 else body.add_paragraph()
            p.text = bullet
            p.font.size = Pt(20)

    prs.save(out_path)


if __name__ == "__main__":
    with open(sys.argv[1], encoding="utf-8") as f:
        build_pptx(json.load(f), sys.argv[2] if len(sys.argv) > 2 else "presentation.pptx")
'''

PPTX_API_SCHEMA = {
    "endpoint": "POST /generate-pptx",
    "request": {
        "content_type": "application/json",
        "body": {
            "title": "string",
            "slides": [{"title": "string", "bullets": ["string"]}],
        },
    },
    "response": {
        "content_type": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "body": "binary .pptx file",
    },
}


def export_panel() -> dict:
    return {
        "prompt": PPTX_GENERATION_PROMPT,
        "api_schema": json.dumps(PPTX_API_SCHEMA, indent=2),
    }
