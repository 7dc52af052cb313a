import io

import pytest

from zelkel.cli import compile_source, line_col, main
from zelkel.lexer import LexError
from zelkel.parser import ParseError
from zelkel.syntax import EndingModule, Program, RequireModule


def test_line_col_start_of_source():
    assert line_col("abc", 0) == (1, 1)


def test_line_col_after_newline_is_column_one():
    source = "abc\ndef"
    assert line_col(source, source.index("d")) == (2, 1)


def test_line_col_within_line_matches_index():
    source = "first line\n  second"
    offset = source.index("second")
    line, col = line_col(source, offset)
    assert line == source[:offset].count("\n") + 1
    assert col == offset - source.rfind("\n", 0, offset)


def test_compile_source_ok():
    assert compile_source("require a::b;") == Program([RequireModule("a", EndingModule("b"))])


def test_compile_source_lex_error_message():
    source = "require a;\n  #"
    with pytest.raises(LexError) as info:
        compile_source(source)
    assert str(info.value) == "Lex error at line 2, col 3: Unexpected character '#'"
    assert info.value.offset == source.index("#")


def test_compile_source_parse_error_message():
    source = "require a;\nfn f -> T {}"
    with pytest.raises(ParseError) as info:
        compile_source(source)
    assert str(info.value).startswith("Parse error at line 2, col 6:")
    assert info.value.offset == source.index("->")


def test_compile_source_end_of_file():
    with pytest.raises(ParseError) as info:
        compile_source("require a")
    assert str(info.value) == "Parse error at end of file"


def test_main_prints_tree(tmp_path, capsys):
    path = tmp_path / "prog.zk"
    path.write_text("require a::b;\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "EndingModule(name='b')" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("require top;"))
    assert main([]) == 0
    assert "EndingModule(name='top')" in capsys.readouterr().out


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.zk"
    path.write_text("require a; #")
    assert main([str(path)]) == 1
    assert "Lex error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.zk")]) == 1
    assert capsys.readouterr().err.startswith("Error:")