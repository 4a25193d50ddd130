"""
Tests for the slide viewer
"""

import json
from unittest.mock import Mock

import pytest

from slidecraft.schemas.deck import Deck
from slidecraft.services.export import PPTX_API_SCHEMA, PPTX_GENERATION_PROMPT
from slidecraft.services.viewer import SlideViewer


@pytest.fixture
def viewer(sample_deck):
    return SlideViewer(sample_deck, on_dismiss=Mock())


class TestNavigation:

    def test_starts_at_first_slide(self, viewer):
        assert viewer.cursor == 0
        assert viewer.position == 1
        assert viewer.current.title == "Overview"
        assert not viewer.has_prev
        assert viewer.has_next

    def test_next_is_idempotent_at_last_index(self, viewer):
        for _ in range(10):
            viewer.next()

        assert viewer.cursor == len(viewer) - 1 == 2
        assert viewer.current.title == "Next Steps"
        assert not viewer.has_next

    def test_prev_is_idempotent_at_zero(self, viewer):
        viewer.next()
        for _ in range(5):
            viewer.prev()

        assert viewer.cursor == 0

    def test_progress(self, viewer):
        assert viewer.progress == pytest.approx(33.33)
        viewer.next()
        viewer.next()
        assert viewer.progress == 100

    def test_single_slide_deck(self):
        deck = Deck.model_validate({"title": "T", "slides": [{"title": "Only", "bullets": ["a"]}]})
        viewer = SlideViewer(deck, on_dismiss=Mock())

        viewer.next()
        viewer.prev()

        assert viewer.cursor == 0
        assert not viewer.has_next and not viewer.has_prev


class TestExportPanel:

    def test_toggle(self, viewer):
        assert viewer.export_open is False
        viewer.open_export()
        assert viewer.export_open is True
        viewer.close_export()
        assert viewer.export_open is False

    def test_panel_is_fixed_content(self, viewer):
        panel = viewer.export_panel()

        assert panel["prompt"] == PPTX_GENERATION_PROMPT
        assert "from pptx import Presentation" in panel["prompt"]
        assert json.loads(panel["api_schema"]) == PPTX_API_SCHEMA

    def test_panel_does_not_move_cursor(self, viewer):
        viewer.next()
        viewer.open_export()
        viewer.export_panel()

        assert viewer.cursor == 1


def test_dismiss_calls_back(viewer):
    viewer.dismiss()

    viewer._on_dismiss.assert_called_once_with()
