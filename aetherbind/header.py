"""Line-oriented extraction of functions, constants and types from C headers."""

from __future__ import annotations

import re

from .model import CConstant, CFunction, CHeader, CParameter, CType

_FUNCTION_RE = re.compile(
    r"^(\w+)\s+(\w+)\s*\(([^)]*)\)\s*;?\s*(//\s*(.+))?$", re.ASCII
)
_CONSTANT_RE = re.compile(r"^#define\s+(\w+)\s+(.+)$", re.ASCII)
_TYPEDEF_RE = re.compile(r"^typedef\s+struct\s+(\w+)\s*\{", re.ASCII)
_LIBRARY_RE = re.compile(r'#pragma comment\(lib,\s*"([^"]+)"\)', re.ASCII)


def parse_c_header(file_path: str) -> CHeader:
    """Read and parse a header file. Raises OSError if it cannot be read."""
    with open(file_path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    return parse_header_text(text, file_path)


def parse_header_text(text: str, file_path: str) -> CHeader:
    """Parse header source text; ``file_path`` names the header."""
    header = CHeader(name=extract_header_name(file_path), path=file_path)
    for raw in text.split("\n"):
        line = raw.strip()
        function = parse_function_declaration(line)
        if function is not None:
            header.functions.append(function)
        constant = parse_constant_declaration(line)
        if constant is not None:
            header.constants.append(constant)
        ctype = parse_type_declaration(line)
        if ctype is not None:
            header.types.append(ctype)
    return header


def extract_header_name(file_path: str) -> str:
    """Return the file name of a header without its ``.h`` suffix."""
    return file_path.split("/")[-1].removesuffix(".h")


def parse_function_declaration(line: str) -> CFunction | None:
    """Parse a one-line function declaration, or return None."""
    match = _FUNCTION_RE.match(line)
    if match is None:
        return None
    return CFunction(
        name=match.group(2),
        return_type=match.group(1),
        parameters=parse_parameters(match.group(3)),
        comment=match.group(5) or "",
    )


def parse_parameters(param_str: str) -> list[CParameter]:
    """Split a parameter list into typed, named parameters."""
    if param_str.strip() == "void" or param_str == "":
        return []
    params = []
    for param in param_str.split(","):
        parts = param.split()
        if len(parts) >= 2:
            params.append(CParameter(name=parts[-1], type=" ".join(parts[:-1])))
    return params


def parse_constant_declaration(line: str) -> CConstant | None:
    """Parse a ``#define NAME VALUE`` line, or return None."""
    match = _CONSTANT_RE.match(line)
    if match is None:
        return None
    return CConstant(name=match.group(1), value=match.group(2).strip(), type="int")


def parse_type_declaration(line: str) -> CType | None:
    """Parse the opening line of a ``typedef struct Name {``, or return None."""
    match = _TYPEDEF_RE.match(line)
    if match is None:
        return None
    return CType(name=match.group(1), type="struct", fields=[])


def parse_library_dependency(line: str) -> str | None:
    """Return the library named in a ``#pragma comment(lib, "...")`` line."""
    if "#pragma comment(lib," not in line:
        return None
    match = _LIBRARY_RE.search(line)
    if match is None:
        return None
    return match.group(1).strip()


def extract_comment(line: str) -> str | None:
    """Return the text after ``//`` on a line, or None if there is none."""
    index = line.find("//")
    if index == -1:
        return None
    return line[index + 2 :].strip()