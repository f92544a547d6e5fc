# epub_extractor/src/epub_extractor/core/epub/reader.py
"""
Module de lecture EPUB.

Responsabilité unique: Extraire les métadonnées et les images depuis
le contenu brut d'un fichier EPUB.

Le pipeline est strictement ordonné:
container.xml -> chemin du package -> package (metadata + manifest) -> images.
"""

import logging
import os
from typing import Dict, Optional, Tuple

from ...config import CONTAINER_PATH
from ..errors import ExtractionError, InvalidArchive, MissingContainer, MissingPackageDocument
from ..models import ExtractionResult, PackageDocument
from .archive import EpubArchive
from .cover_finder import find_cover_href
from .package import parse_container, parse_package, resolve_href

logger = logging.getLogger(__name__)


# --- Étapes du pipeline ---


def _read_root_file_path(archive: EpubArchive) -> str:
    """Étape 1: lit container.xml et retourne le chemin du document de package."""
    content = archive.read_bytes(CONTAINER_PATH)
    if content is None:
        raise MissingContainer(CONTAINER_PATH)
    return parse_container(content)


def _read_package(archive: EpubArchive, root_path: str) -> PackageDocument:
    """Étape 2: lit et parse le document de package."""
    content = archive.read_bytes(root_path)
    if content is None:
        raise MissingPackageDocument(root_path)
    return parse_package(content, root_path)


def _read_image(archive: EpubArchive, package_path: str, href: str) -> Optional[str]:
    """
    Lit une image du manifest en base64.

    Le href est d'abord résolu par rapport au dossier du document de
    package, puis essayé tel quel depuis la racine de l'archive.
    """
    resolved = resolve_href(package_path, href)
    for candidate in dict.fromkeys((resolved, href)):
        payload = archive.read_base64(candidate)
        if payload is not None:
            return payload
    return None


def _read_images(
    archive: EpubArchive, package: PackageDocument
) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Étape 3: lit toutes les images déclarées dans le manifest.

    Une image absente ou illisible est ignorée sans faire échouer
    l'extraction.

    Returns:
        (href -> base64, href -> type MIME)
    """
    images: Dict[str, str] = {}
    media_types: Dict[str, str] = {}

    for item in package.manifest:
        if not item.is_image:
            continue
        payload = _read_image(archive, package.path, item.href)
        if payload is None:
            logger.debug("Skipping unreadable image %s", item.href)
            continue
        images[item.href] = payload
        media_types[item.href] = item.media_type

    return images, media_types


# --- Fonction principale d'extraction ---


def extract(raw_bytes: bytes) -> ExtractionResult:
    """
    Extrait les métadonnées et les images d'un EPUB.

    Args:
        raw_bytes: Contenu complet du fichier EPUB

    Returns:
        ExtractionResult contenant metadata, images, media_types
        et l'image de couverture retenue

    Raises:
        InvalidArchive: données qui ne sont pas un ZIP
        MissingContainer: META-INF/container.xml absent
        MissingRootfile: container.xml sans élément rootfile
        MissingPackageDocument: document de package introuvable
        MalformedPackageDocument: package sans metadata ou manifest
    """
    with EpubArchive.load(raw_bytes) as archive:
        root_path = _read_root_file_path(archive)
        package = _read_package(archive, root_path)
        images, media_types = _read_images(archive, package)

    result = ExtractionResult(
        metadata=dict(package.metadata),
        images=images,
        media_types=media_types,
    )
    result.cover_href = find_cover_href(package, result.images)

    logger.info(
        "Extracted %d metadata field(s) and %d image(s) from %s",
        len(result.metadata),
        len(result.images),
        root_path,
    )
    return result


def extract_from_file(epub_path: str) -> ExtractionResult:
    """
    Lit un fichier EPUB sur disque puis l'extrait.

    Raises:
        InvalidArchive: si le fichier ne peut pas être lu
        ExtractionError: toute autre erreur d'extraction
    """
    try:
        with open(epub_path, "rb") as f:
            raw_bytes = f.read()
    except OSError as e:
        raise InvalidArchive(f"cannot read {epub_path}: {e.strerror or e}") from e
    return extract(raw_bytes)


def safe_extract(epub_path: str) -> Optional[ExtractionResult]:
    """
    Extrait un fichier EPUB de manière sécurisée.

    Args:
        epub_path: Chemin vers le fichier EPUB

    Returns:
        ExtractionResult si succès, None sinon (l'erreur est journalisée)
    """
    try:
        return extract_from_file(epub_path)
    except ExtractionError as e:
        logger.warning("Could not extract %s: %s", os.path.basename(epub_path), e.message)
        return None
