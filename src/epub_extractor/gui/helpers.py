# epub_extractor/src/epub_extractor/gui/helpers.py
"""
Fonctions utilitaires de mise en forme des résultats pour l'interface graphique.
"""

import csv
import logging
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from ..core.models import ExtractionResult

logger = logging.getLogger(__name__)


def metadata_rows(result: "ExtractionResult") -> List[Tuple[str, str]]:
    """Lignes (champ, valeur) à afficher, dans l'ordre du document."""
    return [(key, value or "") for key, value in result.metadata.items()]


def image_rows(result: "ExtractionResult") -> List[Tuple[str, str]]:
    """Lignes (href, type MIME) des images extraites."""
    return [(href, result.media_types.get(href, "")) for href in result.images]


def export_to_csv(filepath: str, result: "ExtractionResult"):
    """Exporte les métadonnées et la liste des images vers un fichier CSV."""
    try:
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["kind", "key", "value"])
            for key, value in metadata_rows(result):
                w.writerow(["metadata", key, value])
            for href, media_type in image_rows(result):
                kind = "cover" if href == result.cover_href else "image"
                w.writerow([kind, href, media_type])
        logger.info(f"Export CSV réussi vers {filepath}")
    except Exception:
        logger.exception(f"Échec de l'export CSV vers {filepath}")
        raise  # Permet à l'appelant (GUI) de gérer l'erreur
