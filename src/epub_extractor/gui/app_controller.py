# epub_extractor/src/epub_extractor/gui/app_controller.py
"""
Contrôleur de données (Gestionnaire d'état).

Ce module centralise le chargement d'un fichier EPUB et l'accès au
résultat de l'extraction, indépendamment de l'interface graphique.
"""

import logging
import os
from typing import List, Optional, Tuple

from ..core.epub import extract_from_file
from ..core.models import ExtractionResult
from . import helpers

logger = logging.getLogger(__name__)


class AppController:
    """Gère l'état du fichier EPUB affiché."""

    def __init__(self):
        self.path: Optional[str] = None
        self.result: Optional[ExtractionResult] = None
        logger.debug("AppController initialisé.")

    @property
    def filename(self) -> str:
        return os.path.basename(self.path) if self.path else ""

    def load_file(self, path: str) -> ExtractionResult:
        """
        Extrait un fichier EPUB et le garde comme fichier courant.

        En cas d'erreur l'état précédent est vidé et l'ExtractionError
        remonte pour que la GUI puisse l'afficher.
        """
        if not path or not os.path.isfile(path):
            raise ValueError("Le chemin du fichier est invalide.")

        logger.info(f"Chargement du fichier : {path}")
        self.clear()
        result = extract_from_file(path)
        self.path = path
        self.result = result
        return result

    def clear(self):
        self.path = None
        self.result = None

    def get_metadata_rows(self) -> List[Tuple[str, str]]:
        if not self.result:
            return []
        return helpers.metadata_rows(self.result)

    def get_cover_bytes(self) -> Optional[bytes]:
        """Octets de l'image de couverture du fichier courant, ou None."""
        if not self.result or not self.result.cover_href:
            return None
        return self.result.image_bytes(self.result.cover_href)

    def get_cover_media_type(self) -> Optional[str]:
        if not self.result or not self.result.cover_href:
            return None
        return self.result.media_types[self.result.cover_href]

    def export_to_csv(self, filepath: str):
        """Exporte le résultat courant vers un fichier CSV."""
        if not filepath:
            raise ValueError("Chemin de fichier non valide pour l'export CSV.")
        if not self.result:
            raise ValueError("Aucun fichier EPUB chargé.")

        logger.info(f"Export CSV vers {filepath}")
        helpers.export_to_csv(filepath, self.result)
