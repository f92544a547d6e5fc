# epub_extractor/src/epub_extractor/main.py
"""
Point d'entrée principal pour EPUB Extractor
Décide de lancer le GUI ou le CLI selon l'environnement
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .config import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_ENCODING,
    LOG_FILENAME,
    LOG_MAX_BYTES,
    NO_GUI_ENV_VAR,
    ensure_directories,
)

USAGE = """Usage: python -m epub_extractor [--cli] <path> [--json] [--save-images DIR]
  path: Fichier EPUB ou dossier contenant des fichiers EPUB
  --cli: Force le mode ligne de commande
  --json: Affiche le résultat au format JSON
  --save-images DIR: Enregistre les images extraites dans DIR"""


def setup_logging():
    """Configure le système de logging."""
    ensure_directories()
    logger = logging.getLogger("epub_extractor")
    logger.setLevel(logging.DEBUG)

    # Handler pour fichier avec rotation
    logfile = os.path.join(LOG_DIR, LOG_FILENAME)
    handler = RotatingFileHandler(
        logfile, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding=LOG_ENCODING
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(threadName)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Handler pour console
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    return logger


def run_gui() -> int:
    """Lance l'interface graphique."""
    logger = logging.getLogger("epub_extractor")
    logger.info("Starting EPUB Extractor GUI")
    try:
        from .gui.main_window import ExtractorGUI

        app = ExtractorGUI()
        app.mainloop()
        return 0
    except Exception:
        logger.exception("Fatal error in main loop")
        return 1


def _parse_cli_args(args: List[str]) -> Optional[dict]:
    """Analyse les arguments CLI. Retourne None si l'usage est incorrect."""
    options = {"path": None, "json": False, "save_images": None}
    it = iter(args)
    for arg in it:
        if arg == "--cli":
            continue
        if arg == "--json":
            options["json"] = True
        elif arg == "--save-images":
            options["save_images"] = next(it, None)
            if not options["save_images"]:
                return None
        elif arg.startswith("--") or options["path"] is not None:
            return None
        else:
            options["path"] = arg
    if options["path"] is None:
        return None
    return options


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Lance le mode ligne de commande."""
    logger = logging.getLogger("epub_extractor")
    logger.info("Starting EPUB Extractor CLI mode")

    options = _parse_cli_args(sys.argv[1:] if argv is None else argv)
    if options is None:
        print(USAGE)
        return 1

    path = options["path"]
    if not os.path.exists(path):
        print(f"Error: {path} does not exist")
        return 1

    try:
        from .cli import (
            cli_process_path,
            cli_save_images,
            outcomes_to_json,
            print_extraction_summary,
        )
        from .core.models import ExtractionResult

        outcomes = cli_process_path(path)
        if options["json"]:
            print(outcomes_to_json(outcomes))
        else:
            print_extraction_summary(outcomes)

        if options["save_images"]:
            saved = cli_save_images(outcomes, options["save_images"])
            print(f"\n{saved} image(s) enregistrée(s) dans {options['save_images']}")

        # Un dossier sans EPUB n'est pas un échec
        if all(isinstance(o, ExtractionResult) for o in outcomes.values()):
            return 0
        return 1
    except Exception as e:
        logger.exception("Error in CLI mode")
        print(f"Error: {e}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée principal."""
    setup_logging()
    args = sys.argv[1:] if argv is None else argv

    # Vérifier si on doit éviter le GUI
    if os.getenv(NO_GUI_ENV_VAR) == "1" or "--cli" in args:
        logger = logging.getLogger("epub_extractor")
        logger.info("NO_GUI mode: running CLI")
        return run_cli(args)

    # Par défaut, lancer le GUI
    return run_gui()


if __name__ == "__main__":
    raise SystemExit(main())
