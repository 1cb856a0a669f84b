# asmalign/ide/tables.py

from typing import List, Sequence

import pandas as pd

from asmalign.core.line import Line, Section
from asmalign.core.renderer import LayoutRenderer

COLUMNS = ["Line", "Section", "Indent", "Elements", "Comment"]


def records_frame(lines: Sequence[Line]) -> pd.DataFrame:
    """
    Tabla de las líneas clasificadas, una fila por Line (mismo orden).
    """
    rows = []
    for i, line in enumerate(lines, start=1):
        rows.append({
            "Line": i,
            "Section": str(line.section),
            "Indent": line.indent_level,
            "Elements": " | ".join(line.elements),
            "Comment": line.comment or "",
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def section_summary(lines: Sequence[Line]) -> pd.DataFrame:
    # Cuántas líneas hay por sección (las que no aparecen quedan en 0)
    counts = pd.Series([str(l.section) for l in lines], dtype="object").value_counts()
    order: List[str] = [str(s) for s in Section]
    return counts.reindex(order, fill_value=0).rename_axis("Section").reset_index(name="Count")


def widths_frame(renderer: LayoutRenderer) -> pd.DataFrame:
    return pd.DataFrame([
        {"Column": "code_pad", "Width": renderer.code_pad},
        {"Column": "data_pad", "Width": renderer.data_pad},
        {"Column": "comment_pad", "Width": renderer.comment_pad},
    ])
