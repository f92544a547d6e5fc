# epub_extractor/src/epub_extractor/core/image_utils.py
"""
Inspection des images extraites (format, dimensions) avec Pillow.
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Erreurs de Pillow pour une image illisible, tronquée ou trop grande
_IMAGE_ERRORS = (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError)


@dataclass
class ImageInfo:
    format: str | None
    width: int
    height: int

    @property
    def size_label(self) -> str:
        return f"{self.width}x{self.height}"


def describe_image(data: bytes) -> Optional[ImageInfo]:
    """Retourne le format et la taille d'une image, ou None si Pillow ne la reconnaît pas."""
    if not data:
        return None
    try:
        with Image.open(BytesIO(data)) as img:
            return ImageInfo(format=img.format, width=img.width, height=img.height)
    except _IMAGE_ERRORS:
        logger.debug("Image could not be identified", exc_info=True)
        return None


def make_thumbnail(data: bytes, size) -> Optional[Image.Image]:
    """Charge une image et la réduit à `size` (largeur, hauteur) en gardant les proportions."""
    try:
        pil = Image.open(BytesIO(data))
        pil.load()
    except _IMAGE_ERRORS:
        logger.exception("Échec de la création de l'aperçu d'image")
        return None
    pil.thumbnail(size)
    return pil
