import pytest

from aetherbind.cli import (
    generate_bindings,
    list_functions,
    main,
    parse_header,
    print_usage,
    scan_directory,
)


@pytest.fixture
def header_file(tmp_path):
    path = tmp_path / "calc.h"
    path.write_text(
        "#define MAX 100\nint add(int a, int b);\nvoid reset(void);\n",
        encoding="utf-8",
    )
    return path


def test_usage_lists_commands(capsys):
    print_usage()
    out = capsys.readouterr().out
    assert "aetherc - Dynamic C Binding Generator for Aether" in out
    assert "scan <directory>" in out


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Commands:" in capsys.readouterr().out


def test_main_unknown_command(capsys):
    assert main(["bogus"]) == 0
    out = capsys.readouterr().out
    assert "Unknown command: bogus" in out
    assert "Commands:" in out


def test_main_generate_missing_arguments(capsys):
    assert main(["generate", "only.h"]) == 0
    assert "Usage: aetherc generate <header_file> <output.ae>" in capsys.readouterr().out


def test_main_generate_writes_file(tmp_path, header_file, capsys):
    out_path = tmp_path / "packages" / "calc" / "src" / "calc.ae"
    assert main(["generate", str(header_file), str(out_path)]) == 0
    text = out_path.read_text(encoding="utf-8")
    assert "func add(a, b) {" in text
    assert "const MAX = 100" in text
    out = capsys.readouterr().out
    assert "Generating bindings for package: calc" in out
    assert f"Generated bindings: {out_path}" in out


def test_main_generate_missing_header(tmp_path, capsys):
    missing = tmp_path / "absent.h"
    assert main(["generate", str(missing), str(tmp_path / "x.ae")]) == 1
    assert f"Failed to parse header: {missing}" in capsys.readouterr().out


def test_generate_bindings_raises_for_missing_header(tmp_path):
    with pytest.raises(OSError):
        generate_bindings(str(tmp_path / "absent.h"), str(tmp_path / "out.ae"))


def test_parse_header_summary(header_file, capsys):
    parse_header(str(header_file))
    out = capsys.readouterr().out
    assert "📋 Header: calc" in out
    assert "🔧 Functions: 2" in out
    assert "📚 Libraries: []" in out
    assert "  int add(int a, int b)" in out
    assert "  void reset(void)" in out
    assert "  MAX = 100" in out


def test_list_functions(header_file, capsys):
    list_functions(str(header_file))
    out = capsys.readouterr().out
    assert out.startswith("🔧 Functions in calc:")
    assert "  int add(int a, int b)" in out


def test_list_functions_missing_file(tmp_path, capsys):
    list_functions(str(tmp_path / "absent.h"))
    assert "Failed to parse header" in capsys.readouterr().out


def test_scan_directory(tmp_path, capsys):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "funcs.h").write_text("int f(int x);\n", encoding="utf-8")
    (tmp_path / "consts.h").write_text("#define X 1\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("int g(int y);\n", encoding="utf-8")
    scan_directory(str(tmp_path))
    out = capsys.readouterr().out
    assert "📦 funcs.h: 1 functions" in out
    assert "consts.h" not in out
    assert "notes.txt" not in out


def test_scan_missing_directory(tmp_path, capsys):
    scan_directory(str(tmp_path / "nowhere"))
    assert "Error scanning directory" in capsys.readouterr().out