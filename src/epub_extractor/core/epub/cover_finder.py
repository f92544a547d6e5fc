# epub_extractor/src/epub_extractor/core/epub/cover_finder.py
"""
Module de recherche de couverture EPUB.

Responsabilité unique: Implémenter différentes stratégies pour désigner
la couverture parmi les images extraites d'un EPUB.

Pattern: Strategy Pattern pour les différentes méthodes de recherche.
"""

import logging
from typing import Dict, Optional

from ...config import COVER_IMAGE_PROPERTY, COVER_NAME_HINTS
from ..models import PackageDocument

logger = logging.getLogger(__name__)


def _find_cover_by_property(package: PackageDocument, images: Dict[str, str]) -> Optional[str]:
    """
    Stratégie 1: Chercher un item marqué properties="cover-image" (EPUB 3).

    Args:
        package: Document de package parsé
        images: Images effectivement extraites (href -> base64)

    Returns:
        href de la couverture ou None
    """
    for item in package.manifest:
        if COVER_IMAGE_PROPERTY in item.properties and item.href in images:
            logger.info("Cover found via cover-image property")
            return item.href
    return None


def _find_cover_by_meta(package: PackageDocument, images: Dict[str, str]) -> Optional[str]:
    """
    Stratégie 2: Chercher via <meta name="cover" content="ID"/> (EPUB 2).

    Args:
        package: Document de package parsé
        images: Images effectivement extraites (href -> base64)

    Returns:
        href de la couverture ou None
    """
    if not package.cover_id:
        return None
    for item in package.manifest:
        if item.id == package.cover_id and item.href in images:
            logger.info("Cover found via OPF metadata")
            return item.href
    return None


def _find_cover_by_bruteforce(package: PackageDocument, images: Dict[str, str]) -> Optional[str]:
    """
    Stratégie 3: Recherche brute-force parmi les images.

    Cherche la première image dont le nom contient "cover" ou "couv",
    sinon retourne la première image du manifest.

    Returns:
        href de la couverture (meilleure estimation) ou None
    """
    hrefs = [item.href for item in package.manifest if item.href in images]
    if not hrefs:
        return None

    def _rank(href: str) -> int:
        name = href.lower()
        for rank, hint in enumerate(COVER_NAME_HINTS):
            if hint in name:
                return rank
        return len(COVER_NAME_HINTS)

    # sorted est stable : l'ordre du manifest départage les ex aequo
    best = sorted(hrefs, key=_rank)[0]
    logger.debug("Cover guessed via brute-force: %s", best)
    return best


def find_cover_href(package: PackageDocument, images: Dict[str, str]) -> Optional[str]:
    """
    Désigne l'image de couverture en appliquant trois stratégies dans l'ordre:
    1. Propriété EPUB 3 cover-image
    2. Métadonnée EPUB 2 meta name="cover"
    3. Recherche brute-force parmi les images

    Seules les images présentes dans `images` sont éligibles.

    Returns:
        href de la couverture ou None s'il n'y a aucune image
    """
    return (
        _find_cover_by_property(package, images)
        or _find_cover_by_meta(package, images)
        or _find_cover_by_bruteforce(package, images)
    )
