from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .tree import Node, TypedNode


class NodeExporter(ABC):
    """One operation per concrete node type.

    Nodes call back into the matching operation with themselves (double
    dispatch). Operations may read node attributes and child views but must
    not change the tree.
    """

    @abstractmethod
    def export_notebook(self, notebook: Notebook) -> None:
        ...

    @abstractmethod
    def export_page(self, page: Page) -> None:
        ...

    @abstractmethod
    def export_text_cell(self, cell: TextCell) -> None:
        ...

    @abstractmethod
    def export_source_code_cell(self, cell: SourceCodeCell) -> None:
        ...

    @abstractmethod
    def export_image_cell(self, cell: ImageCell) -> None:
        ...


class Notebook(TypedNode["Page"]):
    """Root of the tree: a titled, ordered collection of pages."""

    _is_root = True

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(None)

    def __repr__(self) -> str:
        return f"Notebook(title={self.title!r})"

    @property
    def pages(self) -> Tuple[Page, ...]:
        return self.children

    def create_page(self, title: str) -> Page:
        return Page(self, title)

    def export(self, exporter: NodeExporter) -> None:
        exporter.export_notebook(self)


class Page(TypedNode["Cell"]):
    def __init__(self, parent: Notebook, title: str) -> None:
        self.title = title
        super().__init__(parent)

    def __repr__(self) -> str:
        return f"Page(title={self.title!r})"

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self.children

    def add_cell(self, cell: Cell) -> Cell:
        cell.parent = self
        return cell

    def export(self, exporter: NodeExporter) -> None:
        exporter.export_page(self)


class Cell(TypedNode[Node]):
    """A leaf of a page. Subclasses carry the content."""

    def __init__(self, parent: Optional[Page] = None) -> None:
        super().__init__(parent)


class TextCell(Cell):
    def __init__(self, text: str, parent: Optional[Page] = None) -> None:
        self.text = text
        super().__init__(parent)

    def __repr__(self) -> str:
        return f"TextCell(text={self.text!r})"

    def export(self, exporter: NodeExporter) -> None:
        exporter.export_text_cell(self)


class SourceCodeCell(Cell):
    def __init__(self, source_code: str, parent: Optional[Page] = None) -> None:
        self.source_code = source_code  # raw, never escaped
        super().__init__(parent)

    def __repr__(self) -> str:
        return f"SourceCodeCell(source_code={self.source_code!r})"

    def export(self, exporter: NodeExporter) -> None:
        exporter.export_source_code_cell(self)


class ImageCell(Cell):
    def __init__(self, image_url: str, parent: Optional[Page] = None) -> None:
        self.image_url = image_url
        super().__init__(parent)

    def __repr__(self) -> str:
        return f"ImageCell(image_url={self.image_url!r})"

    def export(self, exporter: NodeExporter) -> None:
        exporter.export_image_cell(self)
