import pytest

from asmalign.core.classifier import Classifier, classify
from asmalign.core.config import FormatConfig
from asmalign.core.errors import LabelIndentError
from asmalign.core.line import Line, ScanState, Section


def code_state():
    """Estado tal como queda después de ver la directiva .code"""
    return ScanState(section=Section.CODE, indent=1)


def data_state():
    return ScanState(section=Section.DATA, indent=1)


# ---------- Tests ----------

def test_instruction_with_comment():
    line = Classifier().classify_line("  mov eax, 1 ; init", code_state())
    assert line == Line(("mov", "eax,", "1"), 1, Section.CODE, "; init")


def test_instruction_without_comment_keeps_commas():
    line = Classifier().classify_line("\tadd  eax,ebx", code_state())
    assert line.elements == ("add", "eax,ebx")
    assert line.comment is None
    assert line.section is Section.CODE


def test_label_with_comment_is_dedented():
    line = Classifier().classify_line("_loop: ; top", code_state())
    assert line == Line(("_loop:",), 0, Section.CODE_LABEL, "; top")


def test_label_without_comment():
    line = Classifier().classify_line("   _done:  ", code_state())
    assert line == Line(("_done:",), 0, Section.CODE_LABEL, None)


def test_label_needs_leading_underscore():
    # "loop:" no es label: se tokeniza como instrucción
    line = Classifier().classify_line("loop: nop", code_state())
    assert line.section is Section.CODE
    assert line.elements == ("loop:", "nop")


def test_label_with_zero_indent_is_fatal():
    state = ScanState(section=Section.CODE, indent=0, line_no=7)
    with pytest.raises(LabelIndentError) as exc:
        Classifier().classify_line("_start:", state)
    assert "7" in str(exc.value)


def test_data_line_with_comment_keeps_only_name():
    line = Classifier().classify_line("x dd 0 ; counter", data_state())
    assert line == Line(("x",), 1, Section.DATA, "; counter")


def test_data_line_with_comment_full_declaration():
    cfg = FormatConfig(full_data_declaration=True)
    line = Classifier(cfg).classify_line("  x dd 0   ; counter", data_state())
    assert line.elements == ("x dd 0",)
    assert line.comment == "; counter"


def test_data_line_without_comment_keeps_all_tokens():
    line = Classifier().classify_line('message db "hi", 0', data_state())
    assert line.elements == ("message", "db", '"hi",', "0")
    assert line.indent_level == 1


def test_empty_data_line():
    line = Classifier().classify_line("", data_state())
    assert line == Line((), 1, Section.DATA, None)


def test_comment_only_and_quote_lines_pass_through():
    c = Classifier()
    state = code_state()
    raw = "    ; --- rutina ---"
    assert c.classify_line(raw, state) == Line((), 0, Section.SKIP, raw)
    assert c.classify_line('"texto', state) == Line((), 0, Section.SKIP, '"texto')
    assert state.section is Section.CODE


def test_directives_switch_section():
    state = ScanState()
    c = Classifier()
    assert c.classify_line(".data", state) == Line((".data",), 0, Section.SKIP)
    assert (state.section, state.indent) == (Section.DATA, 1)
    assert c.classify_line(".code", state) == Line((".code",), 0, Section.SKIP)
    assert (state.section, state.indent) == (Section.CODE, 1)


def test_boundary_markers_do_not_change_state():
    state = data_state()
    c = Classifier()
    for raw in ("main PROC", "main ENDP", "END main"):
        assert c.classify_line(raw, state) == Line((raw,), 0, Section.SKIP)
    assert state.section is Section.DATA


def test_comment_rule_wins_over_directive():
    line = Classifier().classify_line("; .data aquí no cuenta", ScanState())
    assert line.section is Section.SKIP
    assert line.comment == "; .data aquí no cuenta"


def test_lines_before_any_directive_pass_through():
    lines = classify([".386", ".model flat, stdcall"])
    assert lines == [
        Line((".386",), 0, Section.SKIP),
        Line((".model flat, stdcall",), 0, Section.SKIP),
    ]


def test_full_scan_order_and_count():
    src = [
        "; cabecera",
        ".data",
        "x dd 0 ; counter",
        "",
        ".code",
        "main PROC",
        "  mov eax, 1 ; init",
        "_loop: ; top",
        "  jmp _loop",
        "main ENDP",
        "END main",
    ]
    lines = classify(src)
    assert len(lines) == len(src)
    assert [l.section for l in lines] == [
        Section.SKIP, Section.SKIP, Section.DATA, Section.DATA, Section.SKIP, Section.SKIP,
        Section.CODE, Section.CODE_LABEL, Section.CODE, Section.SKIP, Section.SKIP,
    ]
    assert lines[8].elements == ("jmp", "_loop")


def test_describe_debug_view():
    line = Line(("_loop:",), 0, Section.CODE_LABEL, "; top")
    assert line.describe() == "['_loop:'] comment:'; top' i_level: 0 -> section:CodeLabel"


def test_unguarded_lines_fall_back_to_current_section():
    c = Classifier()
    assert c.classify_line("  nop", code_state()) == Line(("nop",), 1, Section.CODE)
    assert c.classify_line("y dw 1", data_state()) == Line(("y", "dw", "1"), 1, Section.DATA)
    assert c.classify_line("title X", ScanState()) == Line(("title X",), 0, Section.SKIP)
