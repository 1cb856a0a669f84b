# asmalign/core/config.py

from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigError

# Convenciones del listado (estilo MASM):
#
#   .data            -> inicio de la sección de datos
#   .code            -> inicio de la sección de código
#   main PROC / ENDP -> límites de procedimiento (se copian tal cual)
#   END main         -> fin de programa
#   ; ...            -> comentario de línea
#   _loop:           -> label

INDENT_SIZE = 2
COMMENT_DELIMITER = ";"
PASSTHROUGH_PREFIXES = (";", '"')
DATA_MARKER = ".data"
CODE_MARKER = ".code"
BOUNDARY_MARKERS = ("PROC", "ENDP", "END main")


@dataclass(frozen=True)
class FormatConfig:
    indent_size: int = INDENT_SIZE
    comment_delimiter: str = COMMENT_DELIMITER
    passthrough_prefixes: Tuple[str, ...] = PASSTHROUGH_PREFIXES
    data_marker: str = DATA_MARKER
    code_marker: str = CODE_MARKER
    boundary_markers: Tuple[str, ...] = BOUNDARY_MARKERS
    # Si es True, una línea Data con comentario conserva todo el tramo
    # desde el primer token hasta el ';' (no solo el nombre declarado)
    full_data_declaration: bool = False

    def __post_init__(self):
        if self.indent_size < 1:
            raise ConfigError(f"indent_size debe ser >= 1 (recibido {self.indent_size})")
        if not self.comment_delimiter:
            raise ConfigError("comment_delimiter no puede ser vacío")
        if not self.data_marker or not self.code_marker:
            raise ConfigError("los marcadores de sección no pueden ser vacíos")

    @property
    def indent(self) -> str:
        return " " * self.indent_size
