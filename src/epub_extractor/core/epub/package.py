# epub_extractor/src/epub_extractor/core/epub/package.py
"""
Module de lecture des documents XML d'un EPUB.

Responsabilité unique: Interpréter container.xml et le document de
package (OPF). Chaque élément obligatoire fait l'objet d'une recherche
explicite qui lève une erreur typée s'il est absent.
"""

import logging
import posixpath
from typing import Optional
from urllib.parse import unquote

from lxml import etree

from ...config import (
    COVER_META_NAME,
    MANIFEST_ITEM_TAG,
    MANIFEST_TAG,
    METADATA_TAG,
    ROOTFILE_PATH_ATTR,
    ROOTFILE_TAG,
)
from ..errors import MalformedPackageDocument, MissingRootfile
from ..models import ManifestItem, PackageDocument

logger = logging.getLogger(__name__)


def parse_xml(data: Optional[bytes]) -> Optional[etree._Element]:
    """
    Parse un document XML de manière tolérante.

    Le parseur est configuré comme celui d'ebooklib (recover, pas de
    résolution d'entités). L'encodage déclaré par le document est respecté.

    Returns:
        Élément racine, ou None si rien d'exploitable n'a pu être lu
    """
    if not data or not data.strip():
        return None
    parser = etree.XMLParser(recover=True, resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError:
        logger.debug("XML document could not be parsed", exc_info=True)
        return None


def local_name(element: etree._Element) -> str:
    """Nom sans espace de noms ni préfixe (ex: 'title')."""
    tag = element.tag
    if tag.startswith("{"):
        return tag.rpartition("}")[2]
    # Préfixe non déclaré : le parseur tolérant garde 'dc:title' tel quel
    return tag.rpartition(":")[2]


def qualified_name(element: etree._Element) -> str:
    """Nom de balise tel qu'écrit dans le document (ex: 'dc:title')."""
    if not element.tag.startswith("{"):
        return element.tag
    name = local_name(element)
    if element.prefix:
        return f"{element.prefix}:{name}"
    return name


def text_content(element: etree._Element) -> Optional[str]:
    """Texte concaténé de l'élément et de ses descendants, None si vide."""
    text = str(element.xpath("string()"))
    return text or None


def find_first(root: Optional[etree._Element], name: str) -> Optional[etree._Element]:
    """Premier élément (ordre du document) dont le nom local vaut `name`."""
    if root is None:
        return None
    for element in root.iter(etree.Element):
        if local_name(element) == name:
            return element
    return None


def resolve_href(package_path: str, href: str) -> str:
    """
    Résout un href du manifest par rapport au dossier du document de package.

    Ex: ('OEBPS/content.opf', 'images/cover.jpg') -> 'OEBPS/images/cover.jpg'
    """
    path = unquote(href.split("#", 1)[0])
    base = posixpath.dirname(package_path)
    resolved = posixpath.normpath(posixpath.join(base, path))
    return resolved.lstrip("/")


# --- container.xml ---


def parse_container(data: Optional[bytes]) -> str:
    """
    Extrait le chemin du document de package depuis container.xml.

    Args:
        data: Contenu de META-INF/container.xml

    Returns:
        Valeur de l'attribut full-path du premier rootfile ('' si absente)

    Raises:
        MissingRootfile: si aucun élément rootfile n'existe
    """
    rootfile = find_first(parse_xml(data), ROOTFILE_TAG)
    if rootfile is None:
        raise MissingRootfile()
    return rootfile.get(ROOTFILE_PATH_ATTR) or ""


# --- Document de package (OPF) ---


def _read_manifest_item(element: etree._Element) -> ManifestItem:
    return ManifestItem(
        href=element.get("href"),
        media_type=element.get("media-type"),
        id=element.get("id"),
        properties=(element.get("properties") or "").split(),
    )


def parse_package(data: Optional[bytes], path: str) -> PackageDocument:
    """
    Lit les sections metadata et manifest du document de package.

    Les enfants directs de <metadata> deviennent des paires
    (nom qualifié -> texte); une balise répétée garde la dernière valeur.
    Tous les <item> du manifest sont retournés, dans l'ordre du document.

    Raises:
        MalformedPackageDocument: si metadata ou manifest est absent
    """
    root = parse_xml(data)

    metadata_node = find_first(root, METADATA_TAG)
    if metadata_node is None:
        raise MalformedPackageDocument(path, METADATA_TAG)
    manifest_node = find_first(root, MANIFEST_TAG)
    if manifest_node is None:
        raise MalformedPackageDocument(path, MANIFEST_TAG)

    package = PackageDocument(path=path)

    for child in metadata_node:
        if not isinstance(child.tag, str):
            continue  # commentaires, instructions de traitement
        package.metadata[qualified_name(child)] = text_content(child)
        if local_name(child) == "meta" and child.get("name") == COVER_META_NAME:
            package.cover_id = child.get("content") or package.cover_id

    for element in manifest_node.iter(etree.Element):
        if local_name(element) == MANIFEST_ITEM_TAG:
            package.manifest.append(_read_manifest_item(element))

    logger.debug(
        "Parsed package %s: %d metadata field(s), %d manifest item(s)",
        path,
        len(package.metadata),
        len(package.manifest),
    )
    return package
