# tests/conftest.py
"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests, notamment des
fabriques d'archives EPUB construites en mémoire.
"""

import io
import zipfile
from typing import Dict, Optional, Union

import pytest
from PIL import Image

CONTAINER_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="bookid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
{metadata}
  </metadata>
  <manifest>
{manifest}
  </manifest>
  <spine/>
</package>
"""


def _container_xml(path: str = "content.opf") -> str:
    return CONTAINER_TEMPLATE.format(path=path)


def opf_xml(metadata: str = "", manifest: str = "") -> str:
    return OPF_TEMPLATE.format(metadata=metadata, manifest=manifest)


def build_zip(
    entries: Dict[str, Union[str, bytes]], compression: int = zipfile.ZIP_DEFLATED
) -> bytes:
    """Construit une archive ZIP en mémoire à partir de {nom: contenu}."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def build_epub(
    metadata: str = "",
    manifest: str = "",
    files: Optional[Dict[str, Union[str, bytes]]] = None,
    opf_path: str = "content.opf",
    compression: int = zipfile.ZIP_DEFLATED,
) -> bytes:
    """Construit un EPUB minimal : container.xml, document de package, fichiers."""
    entries: Dict[str, Union[str, bytes]] = {
        "mimetype": "application/epub+zip",
        "META-INF/container.xml": _container_xml(opf_path),
        opf_path: opf_xml(metadata, manifest),
    }
    entries.update(files or {})
    return build_zip(entries, compression)


def _image_bytes(fmt: str, size=(4, 6), color=(200, 30, 30)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def make_epub():
    """Fabrique d'EPUB (voir build_epub)."""
    return build_epub


@pytest.fixture
def container_xml():
    """Fabrique de container.xml pointant vers un chemin donné."""
    return _container_xml


@pytest.fixture
def make_zip():
    """Fabrique d'archives ZIP arbitraires (voir build_zip)."""
    return build_zip


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG", size=(6, 9))


@pytest.fixture
def png_bytes() -> bytes:
    return _image_bytes("PNG", size=(4, 6))


@pytest.fixture
def sample_epub(jpeg_bytes, png_bytes) -> bytes:
    """EPUB réaliste : package dans OEBPS/, couverture EPUB 3, une image secondaire."""
    return build_epub(
        metadata="""
    <dc:title>Foo</dc:title>
    <dc:creator>Bar</dc:creator>
    <dc:language>en</dc:language>
    <meta property="dcterms:modified">2024-01-01T00:00:00Z</meta>""",
        manifest="""
    <item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav"/>
    <item id="cover" href="images/cover.jpg" media-type="image/jpeg" properties="cover-image"/>
    <item id="fig1" href="images/fig1.png" media-type="image/png"/>
    <item id="css" href="style.css" media-type="text/css"/>""",
        files={
            "OEBPS/nav.xhtml": "<html/>",
            "OEBPS/images/cover.jpg": jpeg_bytes,
            "OEBPS/images/fig1.png": png_bytes,
            "OEBPS/style.css": "body {}",
        },
        opf_path="OEBPS/content.opf",
    )


@pytest.fixture
def sample_epub_file(tmp_path, sample_epub):
    """Écrit sample_epub sur disque et retourne son chemin."""
    path = tmp_path / "sample.epub"
    path.write_bytes(sample_epub)
    return str(path)
