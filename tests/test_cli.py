"""
Tests pour le module CLI et le mode ligne de commande de main.
"""

import json

import pytest
from epub_extractor.cli import (
    cli_process_path,
    cli_save_images,
    outcomes_to_json,
    print_extraction_summary,
)
from epub_extractor.core.errors import InvalidArchive
from epub_extractor.core.models import ExtractionResult
from epub_extractor.main import _parse_cli_args, run_cli


@pytest.fixture
def library(tmp_path, sample_epub):
    """Dossier contenant un EPUB valide et un fichier invalide."""
    folder = tmp_path / "library"
    folder.mkdir()
    (folder / "good.epub").write_bytes(sample_epub)
    (folder / "bad.epub").write_text("This is not an EPUB")
    return folder


class TestCliProcessPath:
    """Tests pour cli_process_path."""

    def test_single_file(self, sample_epub_file):
        outcomes = cli_process_path(sample_epub_file)

        assert list(outcomes) == [sample_epub_file]
        assert isinstance(outcomes[sample_epub_file], ExtractionResult)

    def test_folder_keeps_going_after_errors(self, library):
        outcomes = cli_process_path(str(library))

        assert isinstance(outcomes[str(library / "good.epub")], ExtractionResult)
        assert isinstance(outcomes[str(library / "bad.epub")], InvalidArchive)


class TestPrintExtractionSummary:
    """Tests pour print_extraction_summary."""

    def test_print_empty(self, capsys):
        print_extraction_summary({})

        captured = capsys.readouterr()
        assert "Fichiers traités: 0" in captured.out

    def test_print_results_and_errors(self, library, capsys):
        print_extraction_summary(cli_process_path(str(library)))

        out = capsys.readouterr().out
        assert "Fichiers traités: 2" in out
        assert "En erreur: 1" in out
        assert "dc:title: Foo" in out
        assert "images/cover.jpg (image/jpeg, 6x9) [cover]" in out
        assert "images/fig1.png (image/png, 4x6)" in out
        assert "Erreur: Invalid EPUB file" in out


def test_outcomes_to_json(library):
    data = json.loads(outcomes_to_json(cli_process_path(str(library))))

    good = data[str(library / "good.epub")]
    assert good["metadata"]["dc:creator"] == "Bar"
    assert good["cover"] == "images/cover.jpg"
    assert good["images"]["images/fig1.png"]["media_type"] == "image/png"
    assert data[str(library / "bad.epub")]["error"] == "InvalidArchive"


def test_cli_save_images(library, tmp_path):
    outcomes = cli_process_path(str(library))

    saved = cli_save_images(outcomes, str(tmp_path / "out"))

    assert saved == 2
    assert (tmp_path / "out" / "good" / "images" / "cover.jpg").is_file()


class TestParseCliArgs:
    """Tests pour _parse_cli_args."""

    def test_path_and_options(self):
        options = _parse_cli_args(["--cli", "book.epub", "--json", "--save-images", "out"])

        assert options == {"path": "book.epub", "json": True, "save_images": "out"}

    @pytest.mark.parametrize(
        "args",
        [[], ["--json"], ["a.epub", "b.epub"], ["a.epub", "--save-images"], ["a.epub", "--bogus"]],
    )
    def test_invalid_usage(self, args):
        assert _parse_cli_args(args) is None


class TestRunCli:
    """Tests pour run_cli."""

    def test_usage(self, capsys):
        assert run_cli([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_nonexistent_path(self, capsys):
        assert run_cli(["/fake/path/nonexistent.epub"]) == 1
        assert "does not exist" in capsys.readouterr().out

    def test_success(self, sample_epub_file, capsys):
        assert run_cli([sample_epub_file]) == 0
        assert "dc:title: Foo" in capsys.readouterr().out

    def test_json_output(self, sample_epub_file, capsys):
        assert run_cli([sample_epub_file, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[sample_epub_file]["metadata"]["dc:title"] == "Foo"

    def test_failure_exit_code(self, library):
        assert run_cli([str(library)]) == 1

    def test_empty_folder_is_not_a_failure(self, tmp_path, capsys):
        assert run_cli([str(tmp_path)]) == 0
        assert "Fichiers traités: 0" in capsys.readouterr().out
