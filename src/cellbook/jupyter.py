from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import nbformat

from .model import Cell, ImageCell, Notebook, SourceCodeCell, TextCell

logger = logging.getLogger(__name__)

_IMAGE_MIME_TYPES = ("image/png", "image/jpeg")


def _source_text(src: object) -> str:
    if isinstance(src, list):
        body = "".join(str(s) for s in src)
    else:
        body = str(src or "")
    return body.rstrip("\n")


def _output_images(outputs: object) -> List[ImageCell]:
    """Inline images from display_data / execute_result outputs, as data: URLs."""
    images: List[ImageCell] = []
    if not isinstance(outputs, list):
        return images
    for out in outputs:
        if not isinstance(out, dict):
            continue
        data = out.get("data")
        if not isinstance(data, dict):
            continue
        for mime in _IMAGE_MIME_TYPES:
            payload = data.get(mime)
            if payload:
                b64 = "".join(payload) if isinstance(payload, list) else str(payload)
                images.append(ImageCell(f"data:{mime};base64,{b64.strip()}"))
                break
    return images


def _notebook_title(d: Dict, title: Optional[str]) -> str:
    if title:
        return title
    meta = d.get("metadata", {}) if isinstance(d, dict) else {}
    ks = meta.get("kernelspec", {}) if isinstance(meta, dict) else {}
    name = ks.get("display_name") if isinstance(ks, dict) else None
    if isinstance(name, str) and name.strip():
        return name
    return "Untitled"


def ipynb_dict_to_notebook(d: Dict, *, title: Optional[str] = None) -> Notebook:
    """Convert a Jupyter nbformat v4 dict to a single-page Notebook.

    - Jupyter 'markdown' and 'raw' -> TextCell
    - Jupyter 'code' -> SourceCodeCell, followed by one ImageCell per inline
      PNG/JPEG output
    - Unknown cell types are treated as 'raw'
    """
    nb_title = _notebook_title(d, title)
    nb = Notebook(nb_title)
    page = nb.create_page(nb_title)

    cells_in: List[Dict] = d.get("cells", []) if isinstance(d, dict) else []
    for jc in cells_in:
        if not isinstance(jc, dict):
            continue
        jtype = str(jc.get("cell_type") or "raw")
        body = _source_text(jc.get("source", ""))
        cell: Cell
        if jtype == "code":
            cell = SourceCodeCell(body)
        else:
            cell = TextCell(body)
        page.add_cell(cell)
        if jtype == "code":
            for img in _output_images(jc.get("outputs")):
                page.add_cell(img)

    logger.debug("imported %d cells into %r", len(page.cells), nb)
    return nb


def import_ipynb_text(text: str, *, title: Optional[str] = None) -> Notebook:
    nbnode = nbformat.reads(text, as_version=4)
    return ipynb_dict_to_notebook(nbnode, title=title)


def import_ipynb_file(path: str) -> Notebook:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return import_ipynb_text(text, title=Path(path).stem)
