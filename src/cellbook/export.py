from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Dict, List, Type

from .model import (
    ImageCell,
    NodeExporter,
    Notebook,
    Page,
    SourceCodeCell,
    TextCell,
)

logger = logging.getLogger(__name__)

XML_PREAMBLE = '<?xml version="1.0" encoding="UTF-8"?>'


class TextExporter(NodeExporter):
    """Exporter that accumulates a text document, readable through ``output``."""

    @property
    @abstractmethod
    def output(self) -> str:
        ...


class HtmlExporter(TextExporter):
    """Render a notebook as a flat HTML fragment.

    Values are embedded verbatim; markup characters in titles, text, code or
    URLs are not escaped and will produce malformed HTML.
    """

    def __init__(self) -> None:
        self._html = ""

    @property
    def html(self) -> str:
        return self._html

    @property
    def output(self) -> str:
        return self._html

    def export_notebook(self, notebook: Notebook) -> None:
        self._append_line('<main class="notebook">')
        self._append_line(f"<h1>{notebook.title}</h1>")
        for page in notebook.pages:
            page.export(self)
        self._append_line("</main>")

    def export_page(self, page: Page) -> None:
        self._append_line('<section class="page">')
        self._append_line(f"<h2>{page.title}</h2>")
        for cell in page.cells:
            cell.export(self)
        self._append_line("</section>")

    def export_text_cell(self, cell: TextCell) -> None:
        self._append_line(f"<p>{cell.text}</p>")

    def export_source_code_cell(self, cell: SourceCodeCell) -> None:
        self._append_line(f"<code>{cell.source_code}</code>")

    def export_image_cell(self, cell: ImageCell) -> None:
        self._append_line(f'<img src="{cell.image_url}">')

    def _append_line(self, line: str) -> None:
        self._html += "\n" + line


class XmlExporter(TextExporter):
    """Render a notebook as XML. Same caveat as HtmlExporter: no escaping."""

    def __init__(self) -> None:
        self._xml = XML_PREAMBLE

    @property
    def xml(self) -> str:
        return self._xml

    @property
    def output(self) -> str:
        return self._xml

    def export_notebook(self, notebook: Notebook) -> None:
        self._append_line(f'<notebook title="{notebook.title}">')
        for page in notebook.pages:
            page.export(self)
        self._append_line("</notebook>")

    def export_page(self, page: Page) -> None:
        self._append_line(f'<page title="{page.title}">')
        for cell in page.cells:
            cell.export(self)
        self._append_line("</page>")

    def export_text_cell(self, cell: TextCell) -> None:
        self._append_line(f"<text>{cell.text}</text>")

    def export_source_code_cell(self, cell: SourceCodeCell) -> None:
        self._append_line(f"<code>{cell.source_code}</code>")

    def export_image_cell(self, cell: ImageCell) -> None:
        self._append_line(f'<image url="{cell.image_url}" />')

    def _append_line(self, line: str) -> None:
        self._xml += "\n" + line


EXPORTERS: Dict[str, Type[TextExporter]] = {
    "html": HtmlExporter,
    "xml": XmlExporter,
}


def available_formats() -> List[str]:
    return sorted(EXPORTERS)


def exporter_for(fmt: str) -> TextExporter:
    try:
        cls = EXPORTERS[fmt.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown export format: {fmt!r} (known: {', '.join(available_formats())})"
        ) from None
    return cls()


def export_text(notebook: Notebook, fmt: str) -> str:
    """Export ``notebook`` with a fresh exporter for ``fmt`` and return the text."""
    exporter = exporter_for(fmt)
    notebook.export(exporter)
    logger.debug("exported %r as %s", notebook, fmt)
    return exporter.output
