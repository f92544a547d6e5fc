# epub_extractor/src/epub_extractor/core/epub/__init__.py
"""
Module EPUB - Extraction des métadonnées et des images d'un fichier EPUB.

Ce module lit le conteneur, le document de package et les images du
manifest en respectant la séparation des responsabilités.
"""

from .cover_finder import find_cover_href
from .reader import extract, extract_from_file, safe_extract

__all__ = [
    "extract",
    "extract_from_file",
    "find_cover_href",
    "safe_extract",
]
