# asmalign/core/renderer.py
#
# Render en dos pasadas:
#   1) descubrir anchos: code_pad / data_pad (primer elemento) y comment_pad
#   2) emitir cada línea en el orden original: indent + cuerpo + comentario
#
# Necesita la secuencia completa de Line antes de emitir la primera línea.

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import FormatConfig
from .errors import LayoutError
from .line import Line, Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedLine:
    indent: str
    body: str
    line: Line

    @property
    def width(self) -> int:
        return len(self.indent) + len(self.body)


class LayoutRenderer:
    def __init__(self, config: Optional[FormatConfig] = None):
        self.config = config or FormatConfig()
        self.lines: List[str] = []
        self.code_pad = 0
        self.data_pad = 0
        self.comment_pad = 0

    # ---------- anchos ----------
    def _widen(self, pad: int) -> int:
        # Ojo: no es redondeo al múltiplo; se conserva tal cual (7 -> 8, 5 -> 6, 9 -> 10, 6 -> 6)
        return pad + pad % self.config.indent_size

    def _section_pad(self, lines: Sequence[Line], section: Section) -> int:
        widths = [len(l.first) for l in lines if l.section is section and l.elements]
        if not widths:
            raise LayoutError(section)
        return self._widen(max(widths))

    def measure(self, lines: Sequence[Line]) -> None:
        self.code_pad = self._section_pad(lines, Section.CODE)
        self.data_pad = self._section_pad(lines, Section.DATA)
        logger.debug("code_pad=%d data_pad=%d", self.code_pad, self.data_pad)

    # ---------- cuerpo ----------
    def _element(self, i: int, val: str, section: Section) -> str:
        indent = self.config.indent
        if i == 0 and section is Section.CODE:
            return val.ljust(self.code_pad) + indent
        if i == 0 and section is Section.DATA:
            return val.ljust(self.data_pad) + indent
        if i == 0 and section is Section.CODE_LABEL:
            return val
        return f"{val} " if val else ""

    def body(self, line: Line) -> str:
        return "".join(self._element(i, val, line.section)
                       for i, val in enumerate(line.elements)).strip()

    def layout(self, lines: Sequence[Line]) -> List[RenderedLine]:
        self.measure(lines)
        rendered = [RenderedLine(self.config.indent * l.indent_level, self.body(l), l) for l in lines]
        self.comment_pad = max((r.width for r in rendered if r.line.has_comment()), default=0)
        logger.debug("comment_pad=%d", self.comment_pad)
        return rendered

    # ---------- emisión ----------
    def _emit_one(self, r: RenderedLine) -> str:
        comment = r.line.comment
        if not comment:
            # línea vacía (sin cuerpo ni comentario): sin indent colgando
            if not r.body:
                return ""
            return r.indent + r.body
        if r.line.section is Section.SKIP or not comment.strip():
            return r.indent + r.body + comment
        return r.indent + r.body + " " * (self.comment_pad - r.width) + comment

    def render(self, lines: Sequence[Line]) -> List[str]:
        self.lines = [self._emit_one(r) for r in self.layout(lines)]
        return self.lines

    def dump(self) -> str:
        return "\n".join(self.lines) + "\n" if self.lines else ""


def render(lines: Sequence[Line], config: Optional[FormatConfig] = None) -> List[str]:
    return LayoutRenderer(config).render(lines)
