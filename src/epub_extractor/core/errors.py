# epub_extractor/src/epub_extractor/core/errors.py
"""
Erreurs fatales de l'extraction EPUB.

Chaque erreur interrompt l'extraction en cours: aucun résultat partiel
n'est retourné. Les échecs de lecture d'une image ne sont pas des erreurs
et n'apparaissent pas ici.
"""

from typing import Optional


class ExtractionError(Exception):
    """Erreur de base pour toute extraction qui échoue."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArchive(ExtractionError):
    """Les données ne sont pas une archive ZIP lisible."""

    def __init__(self, reason: Optional[str] = None):
        message = "Invalid EPUB file: not a ZIP archive"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason


class MissingContainer(ExtractionError):
    """L'archive ne contient pas META-INF/container.xml."""

    def __init__(self, path: str = "META-INF/container.xml"):
        super().__init__(f"Invalid EPUB file: Missing {path}")
        self.path = path


class MissingRootfile(ExtractionError):
    """container.xml ne déclare aucun élément rootfile."""

    def __init__(self):
        super().__init__("Invalid EPUB file: container.xml has no rootfile element")


class MissingPackageDocument(ExtractionError):
    """Le document de package désigné par container.xml est absent."""

    def __init__(self, path: str):
        super().__init__(f"Invalid EPUB file: Missing {path or '<empty path>'}")
        self.path = path


class MalformedPackageDocument(ExtractionError):
    """Le document de package n'a pas de section metadata ou manifest."""

    def __init__(self, path: str, missing: str):
        super().__init__(f"Invalid EPUB file: {path} has no {missing} element")
        self.path = path
        self.missing = missing
