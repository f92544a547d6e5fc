# epub_extractor/src/epub_extractor/core/epub/archive.py
"""
Module d'accès à l'archive EPUB.

Responsabilité unique: Charger un conteneur ZIP depuis des octets bruts
et exposer ses entrées par nom (octets ou texte base64).
"""

import base64
import io
import logging
import zipfile
import zlib
from typing import List, Optional

from ..errors import InvalidArchive

logger = logging.getLogger(__name__)

# Erreurs levées par zipfile lors de la lecture d'une entrée corrompue
_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
    ValueError,
)


class EpubArchive:
    """
    Vue en lecture seule sur une archive EPUB chargée en mémoire.

    L'archive appartient à une seule extraction et doit être fermée
    à la fin de celle-ci (utilisable comme gestionnaire de contexte).
    """

    def __init__(self, zf: zipfile.ZipFile):
        self._zf = zf

    @classmethod
    def load(cls, raw_bytes: bytes) -> "EpubArchive":
        """
        Charge une archive depuis des octets bruts.

        Args:
            raw_bytes: Contenu complet du fichier EPUB

        Returns:
            Archive prête à être lue

        Raises:
            InvalidArchive: si les données ne forment pas un ZIP valide
        """
        if not isinstance(raw_bytes, (bytes, bytearray, memoryview)):
            raise InvalidArchive(f"expected bytes, got {type(raw_bytes).__name__}")
        try:
            zf = zipfile.ZipFile(io.BytesIO(bytes(raw_bytes)), "r")
        except (zipfile.BadZipFile, OSError, ValueError, NotImplementedError, EOFError) as e:
            raise InvalidArchive(str(e)) from e
        archive = cls(zf)
        logger.debug("Loaded archive with %d entries", len(archive.names()))
        return archive

    def __enter__(self) -> "EpubArchive":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self._zf.close()

    def names(self) -> List[str]:
        """Liste les noms d'entrées de l'archive (hors dossiers)."""
        return [info.filename for info in self._zf.infolist() if not info.is_dir()]

    def has(self, name: str) -> bool:
        if not name:
            return False
        try:
            info = self._zf.getinfo(name)
        except KeyError:
            return False
        return not info.is_dir()

    def read_bytes(self, name: str) -> Optional[bytes]:
        """
        Lit le contenu brut d'une entrée.

        Returns:
            Octets de l'entrée, ou None si elle est absente

        Raises:
            InvalidArchive: si l'entrée existe mais ne peut pas être décompressée
        """
        if not self.has(name):
            return None
        try:
            return self._zf.read(name)
        except _ENTRY_READ_ERRORS as e:
            raise InvalidArchive(f"cannot read {name}: {e}") from e

    def read_base64(self, name: str) -> Optional[str]:
        """
        Lit une entrée binaire et l'encode en base64.

        Contrairement à read_bytes, une entrée illisible retourne None:
        l'appelant décide de l'ignorer.
        """
        try:
            data = self.read_bytes(name)
        except InvalidArchive:
            logger.debug("Unreadable archive entry: %s", name, exc_info=True)
            return None
        if data is None:
            return None
        return base64.b64encode(data).decode("ascii")
