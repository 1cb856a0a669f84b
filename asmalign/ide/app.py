import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

import streamlit as st

from asmalign.core.config import FormatConfig
from asmalign.core.classifier import Classifier
from asmalign.core.errors import AsmAlignError
from asmalign.core.renderer import LayoutRenderer
from asmalign.ide.tables import records_frame, section_summary, widths_frame


def format_code(source: str, config: FormatConfig):
    lines = Classifier(config).classify_text(source)
    renderer = LayoutRenderer(config)
    renderer.render(lines)
    return lines, renderer


st.set_page_config(page_title="asmalign", layout="wide")

st.title("asmalign")
st.write("Pega un listado ensamblador y alinéalo con un clic.")

default_code = """; Programa de ejemplo
.386
.model flat, stdcall
.data
msg db "Hola mundo!", 0 ; mensaje
counter dd 0 ; contador
.code
main PROC
mov ecx, 10 ; iteraciones
_loop: ; inicio del ciclo
inc counter
dec ecx
jnz _loop ; repetir
ret
main ENDP
END main
"""
code = st.text_area("Editor", default_code, height=400)

# Controles
col_a, col_b, col_c = st.columns([1,1,2])
with col_a:
    do_format = st.button("Format", key="format_main")
with col_b:
    show_lines = st.checkbox("Líneas clasificadas", value=True)
    full_decl = st.checkbox("Declaración de datos completa", value=False)
with col_c:
    indent_size = st.slider("Tamaño de indentación", min_value=1, max_value=8, value=2, step=1)

if do_format:
    config = FormatConfig(indent_size=indent_size, full_data_declaration=full_decl)
    try:
        lines, renderer = format_code(code, config)
    except AsmAlignError as e:
        st.error(f" {e}")
    else:
        st.success(f" {len(lines)} líneas formateadas")

        if show_lines:
            st.subheader("Líneas clasificadas")
            st.table(records_frame(lines))
            st.table(section_summary(lines))

        st.subheader("Columnas")
        st.table(widths_frame(renderer))

        st.subheader("Listado alineado")
        asm_code = renderer.dump()
        st.code(asm_code, language="asm")

        # Botón para descargar sin escribir archivo local
        st.download_button(
            label="Descargar (out.asm)",
            data=asm_code,
            file_name="out.asm",
            mime="text/plain"
        )
