"""Append-only report sections."""

from __future__ import annotations


class ReportSection:
    """HTML, plain text and attachments for one area of the report."""

    def __init__(self, name: str, title: str = ""):
        self.name = name
        self.title = title
        self._html: list[str] = []
        self._text: list[str] = []
        self._attachments: list[str] = []

    def add_html(self, fragment: str) -> None:
        self._html.append(fragment)

    def add_text(self, fragment: str) -> None:
        self._text.append(fragment)

    def add_attachment(self, path: str) -> None:
        self._attachments.append(path)

    @property
    def html(self) -> str:
        return "".join(self._html)

    @property
    def text(self) -> str:
        return "".join(self._text)

    @property
    def attachments(self) -> list[str]:
        return list(self._attachments)

    def __repr__(self) -> str:
        return f"ReportSection(name={self.name!r}, title={self.title!r})"


class Report:
    """Ordered sections of one check's annotation."""

    def __init__(self) -> None:
        self._sections: list[ReportSection] = []

    def add_section(self, name: str, title: str = "") -> ReportSection:
        section = ReportSection(name, title)
        self._sections.append(section)
        return section

    @property
    def sections(self) -> list[ReportSection]:
        return list(self._sections)

    def section(self, name: str) -> ReportSection | None:
        """First section called *name*, if any."""
        return next((s for s in self._sections if s.name == name), None)

    @property
    def attachments(self) -> list[str]:
        return [a for s in self._sections for a in s.attachments]

    def to_html(self) -> str:
        return "".join(s.html for s in self._sections)

    def to_text(self) -> str:
        return "".join(s.text for s in self._sections)
