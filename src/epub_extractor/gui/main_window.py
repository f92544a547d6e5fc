# epub_extractor/src/epub_extractor/gui/main_window.py
"""
Interface utilisateur principale avec Tkinter (Vue-Contrôleur)
"""

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import TYPE_CHECKING, Optional

from ..config import GUI_COVER_SIZE, GUI_GEOMETRY, GUI_TITLE, GUI_TREE_HEIGHT
from ..core.errors import ExtractionError
from ..core.image_utils import make_thumbnail
from . import helpers
from .app_controller import AppController

if TYPE_CHECKING:
    from PIL import ImageTk


logger = logging.getLogger(__name__)


class ExtractorGUI(tk.Tk):
    """Interface graphique principale pour EPUB Extractor."""

    def __init__(self):
        super().__init__()
        self.title(GUI_TITLE)
        self.geometry(GUI_GEOMETRY)

        self.controller = AppController()

        # Référence conservée sinon Tk libère l'image
        self.cover_photo: Optional["ImageTk.PhotoImage"] = None
        self.tree: ttk.Treeview | None = None
        self.images_tree: ttk.Treeview | None = None
        self.cover_label: ttk.Label | None = None
        self.cover_caption: ttk.Label | None = None

        self.create_widgets()

    def create_widgets(self):
        # --- Top Frame (Buttons) ---
        frm_top = ttk.Frame(self)
        frm_top.pack(fill=tk.X, padx=6, pady=6)
        self.file_var = tk.StringVar()
        ttk.Entry(frm_top, textvariable=self.file_var, width=80, state="readonly").pack(
            side=tk.LEFT, padx=4
        )
        ttk.Button(frm_top, text="Open EPUB", command=self.select_and_load_file).pack(
            side=tk.LEFT, padx=4
        )
        ttk.Button(frm_top, text="Save CSV", command=self.export_csv).pack(side=tk.LEFT, padx=4)

        body = ttk.Frame(self)
        body.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)

        # --- Book Metadata ---
        left = ttk.LabelFrame(body, text="Book Metadata")
        left.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=4)
        self.tree = ttk.Treeview(
            left, columns=("field", "value"), show="headings", height=GUI_TREE_HEIGHT
        )
        self.tree.heading("field", text="Field")
        self.tree.heading("value", text="Value")
        self.tree.column("field", width=160, anchor="w")
        self.tree.column("value", width=380, anchor="w")
        self.tree.pack(fill=tk.BOTH, expand=True, padx=4, pady=4)

        self.images_tree = ttk.Treeview(
            left, columns=("href", "media_type"), show="headings", height=6
        )
        self.images_tree.heading("href", text="Image")
        self.images_tree.heading("media_type", text="Media type")
        self.images_tree.column("href", width=380, anchor="w")
        self.images_tree.column("media_type", width=160, anchor="w")
        self.images_tree.pack(fill=tk.X, padx=4, pady=4)

        # --- Book Image ---
        right = ttk.LabelFrame(body, text="Book Image")
        right.pack(side=tk.RIGHT, fill=tk.Y, padx=4)
        self.cover_label = ttk.Label(right, text="No cover", anchor="center")
        self.cover_label.pack(padx=4, pady=4)
        self.cover_caption = ttk.Label(right, text="", anchor="center")
        self.cover_caption.pack(padx=4)

    # --- Actions ---
    def select_and_load_file(self):
        """Demande un fichier EPUB et dit au contrôleur de le charger."""
        path = filedialog.askopenfilename(filetypes=[("EPUB", "*.epub")])
        if not path:
            return
        self.file_var.set(path)
        self.load_file(path)

    def load_file(self, path: str):
        try:
            self.controller.load_file(path)
        except ExtractionError as e:
            logger.warning("Invalid EPUB %s: %s", path, e.message)
            self.show_error_message("Invalid EPUB", e.message)
        except Exception as e:
            logger.exception("Failed to load EPUB")
            self.show_error_message("Error", f"An error occurred while reading: {e}")
        try:
            self.refresh()
        except Exception as e:
            logger.exception("Failed to display extraction result")
            self.show_error_message("Error", f"An error occurred while displaying: {e}")

    def export_csv(self):
        if not self.controller.result:
            self.show_info_message("Info", "Open an EPUB file first")
            return
        p = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV", "*.csv")])
        if not p:
            return
        try:
            self.controller.export_to_csv(p)
            self.show_info_message("Success", f"Data exported to {p}")
        except Exception as e:
            self.show_error_message("Error", f"Failed to export CSV: {e}")

    def show_info_message(self, title: str, message: str):
        messagebox.showinfo(title, message)

    def show_error_message(self, title: str, message: str):
        messagebox.showerror(title, message)

    # --- Gestion de la VUE ---
    def refresh(self):
        """Met à jour les listes et l'aperçu depuis le contrôleur."""
        self.tree.delete(*self.tree.get_children())
        for idx, (key, value) in enumerate(self.controller.get_metadata_rows()):
            self.tree.insert("", "end", iid=str(idx), values=(key, value))

        self.images_tree.delete(*self.images_tree.get_children())
        if self.controller.result:
            for idx, row in enumerate(helpers.image_rows(self.controller.result)):
                self.images_tree.insert("", "end", iid=str(idx), values=row)

        self.cover_photo = self.get_cover_photo(self.controller.get_cover_bytes())
        if self.cover_photo:
            self.cover_label.configure(image=self.cover_photo, text="")
        else:
            self.cover_label.configure(image="", text="No cover")
        self.cover_caption.configure(text=self.controller.get_cover_media_type() or "")

    def get_cover_photo(self, data: Optional[bytes]) -> "ImageTk.PhotoImage | None":
        if not data:
            return None
        try:
            from PIL import ImageTk
        except ImportError:
            return None
        pil = make_thumbnail(data, GUI_COVER_SIZE)
        if pil is None:
            return None
        return ImageTk.PhotoImage(pil)
