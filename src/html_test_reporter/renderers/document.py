"""Document builder: the report shell plus append operations, frozen by build()."""

from typing import List, Optional

from ..config import DEFAULT_PAGE_TITLE
from ..schema import (
    CaseRow,
    Cell,
    DetailSection,
    IndexRow,
    IndexTable,
    ReportDocument,
    SummaryLine,
)


class DocumentBuilder:
    """Accumulates report content in order; build() returns an immutable ReportDocument."""

    def __init__(self, title: str, stylesheet: str):
        self.title = title
        self.stylesheet = stylesheet
        self._lines: List[SummaryLine] = []
        self._index_header: Optional[List[Cell]] = None
        self._index_rows: List[IndexRow] = []
        self._sections: List[DetailSection] = []

    def add_line(self, line_id: str, text: str) -> "DocumentBuilder":
        self._lines.append(SummaryLine(id=line_id, text=text))
        return self

    def set_index(self, header: List[Cell]) -> "DocumentBuilder":
        self._index_header = list(header)
        return self

    def add_index_row(self, css_class: str, cells: List[Cell]) -> "DocumentBuilder":
        if self._index_header is None:
            raise RuntimeError("set_index() must be called before add_index_row()")
        self._index_rows.append(IndexRow(css_class=css_class, cells=list(cells)))
        return self

    def add_section(self, info: str, rows: List[CaseRow]) -> "DocumentBuilder":
        self._sections.append(DetailSection(info=info, rows=list(rows)))
        return self

    def build(self) -> ReportDocument:
        index = None
        if self._index_header is not None:
            index = IndexTable(header=self._index_header, rows=self._index_rows)
        return ReportDocument(
            title=self.title,
            stylesheet=self.stylesheet,
            lines=list(self._lines),
            index=index,
            sections=list(self._sections),
        )


def create_document(title: Optional[str] = None, stylesheet: str = "") -> DocumentBuilder:
    """Empty report shell: charset meta, <title>, inline <style>, <h1>."""
    return DocumentBuilder(title or DEFAULT_PAGE_TITLE, stylesheet)
