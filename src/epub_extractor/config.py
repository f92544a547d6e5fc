# epub_extractor/src/epub_extractor/config.py
"""
Configuration et constantes pour EPUB Extractor
"""

import os

# ---------- Structure EPUB ----------
CONTAINER_PATH = "META-INF/container.xml"
ROOTFILE_TAG = "rootfile"
ROOTFILE_PATH_ATTR = "full-path"
METADATA_TAG = "metadata"
MANIFEST_TAG = "manifest"
MANIFEST_ITEM_TAG = "item"
IMAGE_MEDIA_PREFIX = "image/"

# ---------- Couverture ----------
COVER_IMAGE_PROPERTY = "cover-image"  # EPUB 3
COVER_META_NAME = "cover"  # EPUB 2
COVER_NAME_HINTS = ("cover", "couv")

# ---------- Dossiers ----------
LOG_DIR = "logs"

# ---------- Extensions supportées ----------
SUPPORTED_EXT = (".epub",)

# ---------- Configuration logging ----------
LOG_FILENAME = "epub_extractor.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 5
LOG_ENCODING = "utf-8"

# ---------- Configuration GUI ----------
GUI_TITLE = "EPUB Metadata Extractor"
GUI_GEOMETRY = "900x600"
GUI_TREE_HEIGHT = 18
GUI_COVER_SIZE = (200, 300)

# ---------- Variables d'environnement ----------
NO_GUI_ENV_VAR = "EPUB_EXTRACTOR_NO_GUI"


# ---------- Initialisation des dossiers ----------
def ensure_directories():
    """Crée les dossiers nécessaires s'ils n'existent pas."""
    os.makedirs(LOG_DIR, exist_ok=True)
