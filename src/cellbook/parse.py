from __future__ import annotations

import logging
from typing import Callable, Dict

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import Cell, ImageCell, Notebook, Page, SourceCodeCell, TextCell

logger = logging.getLogger(__name__)

CELL_KINDS: Dict[str, Callable[[str], Cell]] = {
    "text": TextCell,
    "code": SourceCodeCell,
    "image": ImageCell,
}


def _require_title(m: dict, where: str) -> str:
    title = m.get("title")
    if title is None:
        raise ValueError(f"{where}: missing 'title'")
    return str(title)


def _build_cell(raw: object, page: Page, pos: int) -> Cell:
    where = f"page {page.title!r}, cell {pos}"
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: expected a mapping like 'text: ...'")
    if len(raw) != 1:
        raise ValueError(
            f"{where}: expected exactly one of {', '.join(CELL_KINDS)}, got {len(raw)} keys"
        )
    ((kind, value),) = raw.items()
    factory = CELL_KINDS.get(str(kind))
    if factory is None:
        raise ValueError(f"{where}: unknown cell kind {kind!r}")
    return factory("" if value is None else str(value))


def notebook_from_dict(data: object) -> Notebook:
    """Build a Notebook from a plain mapping.

    Expected shape::

        title: str
        pages:
          - title: str
            cells: [{text|code|image: str}, ...]
    """
    if not isinstance(data, dict):
        raise ValueError("Notebook description must be a mapping")
    nb = Notebook(_require_title(data, "notebook"))
    pages = data.get("pages") or []
    if not isinstance(pages, list):
        raise ValueError("notebook: 'pages' must be a list")
    for i, raw_page in enumerate(pages, start=1):
        if not isinstance(raw_page, dict):
            raise ValueError(f"page {i}: expected a mapping")
        page = nb.create_page(_require_title(raw_page, f"page {i}"))
        cells = raw_page.get("cells") or []
        if not isinstance(cells, list):
            raise ValueError(f"page {i}: 'cells' must be a list")
        for j, raw_cell in enumerate(cells, start=1):
            page.add_cell(_build_cell(raw_cell, page, j))
    logger.debug("built %r with %d pages", nb, len(nb.pages))
    return nb


def parse_text(text: str) -> Notebook:
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(text)
    except YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    return notebook_from_dict(data)


def parse_file(path: str) -> Notebook:
    with open(path, "r", encoding="utf-8") as f:
        return parse_text(f.read())
