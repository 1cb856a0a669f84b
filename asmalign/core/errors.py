# asmalign/core/errors.py


class AsmAlignError(Exception):
    """Raíz de todos los errores del formateador."""


class ConfigError(AsmAlignError):
    pass


class SourceReadError(AsmAlignError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"No se pudo leer '{path}': {reason}")
        self.path = path
        self.reason = reason


class LayoutError(AsmAlignError):
    """
    El listado no cumple las precondiciones del render: hace falta al menos
    una línea Code y una línea Data con primer elemento no vacío.
    """
    def __init__(self, section):
        super().__init__(
            f"No hay líneas de tipo {section} con contenido; "
            f"no se puede calcular el ancho de columna de {section}"
        )
        self.section = section


class LabelIndentError(AsmAlignError):
    def __init__(self, line_no: int, text: str):
        super().__init__(
            f"[línea {line_no}] label con indentación 0 (¿falta la directiva de código?): {text!r}"
        )
        self.line_no = line_no
        self.text = text
