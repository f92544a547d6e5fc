"""
Tests pour le contrôleur et les helpers de l'interface graphique.
"""

import csv

import pytest
from epub_extractor.core.errors import InvalidArchive
from epub_extractor.gui import helpers
from epub_extractor.gui.app_controller import AppController


class TestAppController:
    """Tests pour AppController."""

    def test_load_file(self, sample_epub_file, jpeg_bytes):
        controller = AppController()

        controller.load_file(sample_epub_file)

        assert controller.filename == "sample.epub"
        assert ("dc:title", "Foo") in controller.get_metadata_rows()
        assert controller.get_cover_bytes() == jpeg_bytes
        assert controller.get_cover_media_type() == "image/jpeg"

    def test_invalid_path(self):
        with pytest.raises(ValueError):
            AppController().load_file("/fake/path/nonexistent.epub")

    def test_invalid_epub_clears_state(self, sample_epub_file, tmp_path):
        bad = tmp_path / "bad.epub"
        bad.write_text("This is not an EPUB")
        controller = AppController()
        controller.load_file(sample_epub_file)

        with pytest.raises(InvalidArchive):
            controller.load_file(str(bad))

        assert controller.result is None
        assert controller.get_metadata_rows() == []
        assert controller.get_cover_bytes() is None

    def test_export_without_file(self, tmp_path):
        with pytest.raises(ValueError):
            AppController().export_to_csv(str(tmp_path / "out.csv"))

    def test_export_to_csv(self, sample_epub_file, tmp_path):
        controller = AppController()
        controller.load_file(sample_epub_file)
        out = tmp_path / "out.csv"

        controller.export_to_csv(str(out))

        with open(out, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["kind", "key", "value"]
        assert ["metadata", "dc:title", "Foo"] in rows
        assert ["cover", "images/cover.jpg", "image/jpeg"] in rows
        assert ["image", "images/fig1.png", "image/png"] in rows


class TestHelpers:
    """Tests pour les helpers de mise en forme."""

    def test_metadata_rows_replace_none(self):
        from epub_extractor.core.models import ExtractionResult

        result = ExtractionResult(metadata={"dc:title": "Foo", "dc:rights": None})

        assert helpers.metadata_rows(result) == [("dc:title", "Foo"), ("dc:rights", "")]
