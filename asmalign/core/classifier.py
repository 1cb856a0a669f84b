# asmalign/core/classifier.py
#
# Clasificador/tokenizador de líneas.
#
# Recorre el listado una sola vez, línea por línea, con un ScanState explícito
# (sección actual + indentación). Cada línea pasa por una lista ordenada de
# reglas; la primera que devuelve un Line gana:
#
#   1. comentario de línea completa o línea que empieza con comilla -> Skip
#   2. directiva de datos   (.data)                -> Skip, estado = Data
#   3. directiva de código  (.code)                -> Skip, estado = Code
#   4. límites PROC / ENDP / END main              -> Skip
#   si ninguna aplica: según la sección actual (Data / Skip / Code)
#
# Solo las reglas 2 y 3 modifican el estado.

import logging
import re
from typing import Callable, Iterable, List, Optional

from .config import FormatConfig
from .errors import LabelIndentError
from .line import Line, ScanState, Section

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\S+")
# la coma final queda pegada al token: "eax," "1"
INSTRUCTION_RE = re.compile(r"\S+,?")

Rule = Callable[[str, ScanState], Optional[Line]]


class Classifier:
    def __init__(self, config: Optional[FormatConfig] = None):
        self.config = config or FormatConfig()
        delim = re.escape(self.config.comment_delimiter)
        self.label_re = re.compile(rf"^\s*_\w+:\s*(?:{delim})?.*$")
        # El orden importa: es la precedencia
        self.rules: List[Rule] = [
            self._rule_comment_line,
            self._rule_data_directive,
            self._rule_code_directive,
            self._rule_boundary,
        ]

    # -------- API --------
    def classify(self, lines: Iterable[str], state: Optional[ScanState] = None) -> List[Line]:
        state = state or ScanState()
        out: List[Line] = []
        for raw in lines:
            state.line_no += 1
            out.append(self.classify_line(raw, state))
        logger.debug("clasificadas %d líneas (sección final: %s)", len(out), state.section)
        return out

    def classify_text(self, text: str) -> List[Line]:
        return self.classify(text.splitlines())

    def classify_line(self, raw: str, state: ScanState) -> Line:
        for rule in self.rules:
            line = rule(raw, state)
            if line is not None:
                return line
        # si ninguna regla guardada aplica, decide la sección actual
        return self._rule_by_section(raw, state)

    # -------- helpers --------
    def _split_comment(self, raw: str):
        """Devuelve (texto antes del ';', comentario desde el ';') o (raw, None)."""
        idx = raw.find(self.config.comment_delimiter)
        if idx < 0:
            return raw, None
        return raw[:idx], raw[idx:]

    def _passthrough(self, raw: str, indent: int = 0) -> Line:
        return Line.create([raw], indent, Section.SKIP)

    # -------- reglas --------
    def _rule_comment_line(self, raw: str, state: ScanState) -> Optional[Line]:
        if raw.strip().startswith(self.config.passthrough_prefixes):
            return Line.create([], 0, Section.SKIP, raw)
        return None

    def _rule_data_directive(self, raw: str, state: ScanState) -> Optional[Line]:
        if self.config.data_marker not in raw:
            return None
        logger.debug("[línea %d] %s -> %s", state.line_no, state.section, Section.DATA)
        state.enter(Section.DATA)
        return self._passthrough(raw)

    def _rule_code_directive(self, raw: str, state: ScanState) -> Optional[Line]:
        if self.config.code_marker not in raw:
            return None
        logger.debug("[línea %d] %s -> %s", state.line_no, state.section, Section.CODE)
        state.enter(Section.CODE)
        return self._passthrough(raw)

    def _rule_boundary(self, raw: str, state: ScanState) -> Optional[Line]:
        if any(marker in raw for marker in self.config.boundary_markers):
            return self._passthrough(raw)
        return None

    def _rule_by_section(self, raw: str, state: ScanState) -> Line:
        if state.section is Section.DATA:
            return self._data_line(raw, state)
        if state.section is Section.SKIP:
            return self._passthrough(raw, state.indent)
        return self._code_line(raw, state)

    # -------- por sección --------
    def _data_line(self, raw: str, state: ScanState) -> Line:
        if not raw:
            return Line.create([], state.indent, Section.DATA)

        body, comment = self._split_comment(raw)
        if comment is None:
            return Line.create(TOKEN_RE.findall(raw), state.indent, Section.DATA)

        m = TOKEN_RE.search(body)
        if m is None:
            elements = []
        elif self.config.full_data_declaration:
            elements = [body[m.start():].rstrip()]
        else:
            # solo el nombre declarado
            elements = [m.group(0)]
        return Line.create(elements, state.indent, Section.DATA, comment)

    def _code_line(self, raw: str, state: ScanState) -> Line:
        body, comment = self._split_comment(raw)

        if self.label_re.match(raw):
            if state.indent == 0:
                raise LabelIndentError(state.line_no, raw)
            text = body.strip() if comment is not None else raw.strip()
            return Line.create([text], state.indent - 1, Section.CODE_LABEL, comment)

        return Line.create(INSTRUCTION_RE.findall(body), state.indent, Section.CODE, comment)


def classify(lines: Iterable[str], config: Optional[FormatConfig] = None) -> List[Line]:
    return Classifier(config).classify(lines)
