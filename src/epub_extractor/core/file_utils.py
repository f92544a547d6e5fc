# epub_extractor/src/epub_extractor/core/file_utils.py
"""
Logique pour les opérations sur le système de fichiers (trouver, enregistrer).
"""

import logging
import os
import re
from pathlib import Path
from typing import List

from ..config import SUPPORTED_EXT
from .models import ExtractionResult

logger = logging.getLogger(__name__)


def find_epubs_in_folder(folder: str) -> List[str]:
    """Trouve tous les fichiers EPUB dans un dossier et ses sous-dossiers."""
    files = []
    for root, _, filenames in os.walk(folder):
        for f in filenames:
            if f.lower().endswith(SUPPORTED_EXT):
                files.append(os.path.join(root, f))
    files.sort()
    logger.info("Found %d epub(s) in folder %s", len(files), folder)
    return files


def sanitize_filename(value: str) -> str:
    """Nettoie un texte pour un nom de fichier valide."""
    value = re.sub(r'[\\/*?:"<>|]', "", value)
    value = re.sub(r"\s+", " ", value)
    return value.strip()


def save_images(result: ExtractionResult, dest_dir: str) -> List[str]:
    """
    Écrit les images décodées d'une extraction dans `dest_dir`.

    L'arborescence des href est conservée (images/cover.jpg ->
    dest_dir/images/cover.jpg); les segments '..' sont neutralisés.

    Returns:
        Liste des chemins écrits
    """
    written = []
    root = Path(dest_dir)
    for href in result.images:
        parts = [sanitize_filename(p) for p in href.split("/") if p not in ("", ".", "..")]
        parts = [p for p in parts if p]
        if not parts:
            continue
        target = root.joinpath(*parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(result.image_bytes(href))
        written.append(str(target))
    logger.info("Saved %d image(s) to %s", len(written), dest_dir)
    return written
