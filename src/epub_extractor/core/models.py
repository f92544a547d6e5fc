# epub_extractor/src/epub_extractor/core/models.py
import base64
from dataclasses import dataclass, field
from typing import Dict, List

from ..config import IMAGE_MEDIA_PREFIX


@dataclass
class ManifestItem:
    """Entrée <item> du manifest d'un document de package."""

    href: str | None
    media_type: str | None = None
    id: str | None = None
    properties: List[str] = field(default_factory=list)

    @property
    def is_image(self) -> bool:
        return bool(self.href) and (self.media_type or "").startswith(IMAGE_MEDIA_PREFIX)


@dataclass
class PackageDocument:
    """Contenu utile du document de package (OPF)."""

    path: str
    metadata: Dict[str, str | None] = field(default_factory=dict)
    manifest: List[ManifestItem] = field(default_factory=list)

    # Indice de couverture EPUB 2 : <meta name="cover" content="ID"/>
    cover_id: str | None = None


@dataclass
class ExtractionResult:
    """Modèle de données pour le résultat d'une extraction EPUB."""

    # Métadonnées : nom de balise qualifié (ex: 'dc:title') -> texte
    metadata: Dict[str, str | None] = field(default_factory=dict)

    # Images : href du manifest -> contenu encodé en base64
    images: Dict[str, str] = field(default_factory=dict)

    # Type MIME déclaré dans le manifest pour chaque image extraite
    media_types: Dict[str, str] = field(default_factory=dict)

    cover_href: str | None = None

    def image_bytes(self, href: str) -> bytes:
        """Décode le contenu base64 d'une image extraite."""
        return base64.b64decode(self.images[href])

    def data_uri(self, href: str) -> str:
        """Construit une URI data: avec le type MIME déclaré par le manifest."""
        return f"data:{self.media_types[href]};base64,{self.images[href]}"

    def cover_data_uri(self) -> str | None:
        if not self.cover_href:
            return None
        return self.data_uri(self.cover_href)
