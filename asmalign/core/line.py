# asmalign/core/line.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Section(Enum):
    """
    Rol estructural de una línea.

    Skip, Data y Code son estados del escaneo; CodeLabel es solo una
    etiqueta por línea (labels dentro de Code).
    """
    SKIP = "Skip"
    DATA = "Data"
    CODE = "Code"
    CODE_LABEL = "CodeLabel"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Line:
    elements: Tuple[str, ...] = ()
    indent_level: int = 0
    section: Section = Section.SKIP
    comment: Optional[str] = None

    @classmethod
    def create(cls, elements, indent_level: int, section: Section, comment: Optional[str] = None) -> "Line":
        return cls(tuple(str(e) for e in elements), indent_level, section, comment)

    @property
    def first(self) -> str:
        return self.elements[0] if self.elements else ""

    def has_comment(self) -> bool:
        return bool(self.comment)

    def describe(self) -> str:
        # Vista de depuración (--dump-lines)
        return (f"{list(self.elements)!r} comment:{self.comment!r} "
                f"i_level: {self.indent_level} -> section:{self.section}")

    def __str__(self) -> str:
        return self.describe()


@dataclass
class ScanState:
    """Estado del escaneo: sección actual + nivel de indentación."""
    section: Section = Section.SKIP
    indent: int = 0
    line_no: int = field(default=0, compare=False)

    def enter(self, section: Section) -> None:
        self.section = section
        self.indent = 1
