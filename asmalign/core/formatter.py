# asmalign/core/formatter.py
#
# Fachada: texto crudo -> List[Line] -> texto alineado.
# El flujo es en un solo sentido; el render nunca modifica las líneas.

import logging
from typing import List, Optional

from .classifier import Classifier
from .config import FormatConfig
from .line import Line
from .renderer import LayoutRenderer

logger = logging.getLogger(__name__)


class AsmFormatter:
    def __init__(self, config: Optional[FormatConfig] = None):
        self.config = config or FormatConfig()
        self.classifier = Classifier(self.config)
        self.lines: List[Line] = []

    def classify(self, text: str) -> List[Line]:
        self.lines = self.classifier.classify_text(text)
        return self.lines

    def format_lines(self, text: str) -> List[str]:
        lines = self.classify(text)
        out = LayoutRenderer(self.config).render(lines)
        logger.debug("formateadas %d líneas", len(out))
        return out

    def format(self, text: str) -> str:
        out = self.format_lines(text)
        return "\n".join(out) + "\n" if out else ""


def format_source(text: str, config: Optional[FormatConfig] = None) -> str:
    return AsmFormatter(config).format(text)
