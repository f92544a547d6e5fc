# epub_extractor/src/epub_extractor/cli.py
"""
Logique pour le mode ligne de commande.

Utilise le module core.epub pour réutiliser la logique d'extraction.
"""

import json
import logging
import os
from typing import Dict, Union

from .core.epub import extract_from_file
from .core.errors import ExtractionError
from .core.file_utils import find_epubs_in_folder, save_images
from .core.image_utils import describe_image
from .core.models import ExtractionResult

logger = logging.getLogger(__name__)

Outcome = Union[ExtractionResult, ExtractionError]


def cli_process_path(path: str) -> Dict[str, Outcome]:
    """
    Extrait un fichier EPUB ou tous les EPUBs d'un dossier.

    Args:
        path: Fichier .epub ou dossier à parcourir

    Returns:
        Dictionnaire chemin -> résultat (ou erreur d'extraction)
    """
    files = find_epubs_in_folder(path) if os.path.isdir(path) else [path]
    logger.info(f"CLI mode - processing {len(files)} file(s) from {path}")

    outcomes: Dict[str, Outcome] = {}
    for p in files:
        try:
            outcomes[p] = extract_from_file(p)
        except ExtractionError as e:
            logger.warning("Extraction failed for %s: %s", p, e.message)
            outcomes[p] = e

    ok = sum(1 for o in outcomes.values() if isinstance(o, ExtractionResult))
    logger.info(f"CLI mode - extracted {ok}/{len(outcomes)} file(s)")
    return outcomes


def cli_save_images(outcomes: Dict[str, Outcome], dest_dir: str) -> int:
    """Enregistre les images de chaque extraction réussie sous dest_dir/<nom du livre>/."""
    total = 0
    for p, outcome in outcomes.items():
        if not isinstance(outcome, ExtractionResult):
            continue
        stem = os.path.splitext(os.path.basename(p))[0]
        total += len(save_images(outcome, os.path.join(dest_dir, stem)))
    return total


def _image_line(result: ExtractionResult, href: str) -> str:
    info = describe_image(result.image_bytes(href))
    size = info.size_label if info else "?"
    marker = " [cover]" if href == result.cover_href else ""
    return f"  - {href} ({result.media_types[href]}, {size}){marker}"


def print_extraction_summary(outcomes: Dict[str, Outcome]):
    """Affiche un résumé des extractions."""
    print("\n=== Résumé de l'extraction ===")
    print(f"Fichiers traités: {len(outcomes)}")

    failed = [p for p, o in outcomes.items() if isinstance(o, ExtractionError)]
    print(f"En erreur: {len(failed)}")

    for p, outcome in outcomes.items():
        print(f"\n{os.path.basename(p)}:")

        if isinstance(outcome, ExtractionError):
            print(f"  Erreur: {outcome.message}")
            continue

        for key, value in outcome.metadata.items():
            print(f"  {key}: {value if value is not None else ''}")

        if outcome.images:
            print(f"  Images ({len(outcome.images)}):")
            for href in outcome.images:
                print(_image_line(outcome, href))
        else:
            print("  Images: aucune")


def outcomes_to_json(outcomes: Dict[str, Outcome]) -> str:
    """Sérialise les résultats en JSON (les images sont décrites, pas incluses)."""
    data = {}
    for p, outcome in outcomes.items():
        if isinstance(outcome, ExtractionError):
            data[p] = {"error": type(outcome).__name__, "message": outcome.message}
            continue
        data[p] = {
            "metadata": outcome.metadata,
            "images": {
                href: {
                    "media_type": outcome.media_types[href],
                    "bytes": len(outcome.image_bytes(href)),
                }
                for href in outcome.images
            },
            "cover": outcome.cover_href,
        }
    return json.dumps(data, ensure_ascii=False, indent=2)
