"""Command-line entry point for the binding generator."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator

from .generator import extract_package_name, format_parameters, write_binding_file
from .header import parse_c_header
from .model import CBinding

_PROGRAM = "aetherc"
_TITLE = "🍕 aetherc - Dynamic C Binding Generator for Aether"

_COMMANDS: tuple[tuple[str, str], ...] = (
    ("generate <header> <output.ae>", "Parse C header and generate Aether bindings"),
    ("parse <header>", "Parse and display C header contents"),
    ("list <header>", "List functions in C header"),
    ("scan <directory>", "Scan directory for C headers"),
    ("help", "Show this help"),
)

_EXAMPLES: tuple[str, ...] = (
    "generate /usr/include/stdio.h packages/c/src/stdio.ae",
    "generate /usr/include/math.h packages/c/src/math.ae",
    "generate /usr/include/llvm-c/Core.h packages/llvm/src/core.ae",
    "scan /usr/include",
)


def _usage_lines() -> Iterator[str]:
    """Yield the lines of the command summary."""
    yield _TITLE
    yield ""
    yield "Commands:"
    width = max(len(usage) for usage, _ in _COMMANDS) + 2
    for usage, description in _COMMANDS:
        yield f"  {usage.ljust(width)}{description}"
    yield ""
    yield "Examples:"
    for example in _EXAMPLES:
        yield f"  {_PROGRAM} {example}"


def print_usage() -> None:
    """Print the command summary."""
    for line in _usage_lines():
        print(line)


def generate_bindings(header_path: str, output_path: str) -> None:
    """Parse a header and write its binding file.

    Raises OSError if the header cannot be read.
    """
    print(f"🍕 Parsing C header: {header_path}")
    header = parse_c_header(header_path)
    package_name = extract_package_name(output_path)
    binding = CBinding.from_header(header, package_name)
    print(f"📦 Generating bindings for package: {package_name}")
    print(
        f"🔧 Found {len(header.functions)} functions, "
        f"{len(header.constants)} constants, {len(header.types)} types"
    )
    try:
        write_binding_file(binding, output_path)
    except OSError as err:
        print(f"❌ Failed to create output file: {err}")
    print(f"✅ Generated bindings: {output_path}")


def parse_header(header_path: str) -> None:
    """Print a summary of a header's contents."""
    try:
        header = parse_c_header(header_path)
    except OSError as err:
        print(f"❌ Failed to parse header: {header_path} - {err}")
        return
    print(f"📋 Header: {header.name}")
    print(f"📁 Path: {header.path}")
    print(f"🔧 Functions: {len(header.functions)}")
    print(f"📊 Constants: {len(header.constants)}")
    print(f"🏗️  Types: {len(header.types)}")
    print(f"📚 Libraries: [{' '.join(header.libraries)}]")
    if header.functions:
        print("\n🔧 Functions:")
        for fn in header.functions:
            print(f"  {fn.return_type} {fn.name}({format_parameters(fn.parameters)})")
    if header.constants:
        print("\n📊 Constants:")
        for constant in header.constants:
            print(f"  {constant.name} = {constant.value}")


def list_functions(header_path: str) -> None:
    """Print the functions declared in a header."""
    try:
        header = parse_c_header(header_path)
    except OSError as err:
        print(f"❌ Failed to parse header: {header_path} - {err}")
        return
    print(f"🔧 Functions in {header.name}:")
    for fn in header.functions:
        print(f"  {fn.return_type} {fn.name}({format_parameters(fn.parameters)})")


def _walk_files(root: str) -> Iterator[str]:
    """Yield non-directory paths under ``root`` in lexical order."""
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def scan_directory(dir_path: str) -> None:
    """Report every header under a directory that declares functions."""
    print(f"🔍 Scanning directory: {dir_path}")
    try:
        for path in _walk_files(dir_path):
            if not path.endswith(".h"):
                continue
            try:
                header = parse_c_header(path)
            except OSError:
                continue
            if header.functions:
                print(f"📦 {os.path.basename(path)}: {len(header.functions)} functions")
    except OSError as err:
        print(f"❌ Error scanning directory: {err}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print_usage()
        return 0
    command, rest = args[0], args[1:]
    if command == "generate":
        if len(rest) < 2:
            print("Usage: aetherc generate <header_file> <output.ae>")
            print(
                "Example: aetherc generate /usr/include/stdio.h "
                "packages/c/src/stdio.ae"
            )
            return 0
        try:
            generate_bindings(rest[0], rest[1])
        except OSError as err:
            print(f"❌ Failed to parse header: {rest[0]} - {err}")
            return 1
    elif command == "parse":
        if not rest:
            print("Usage: aetherc parse <header_file>")
            return 0
        parse_header(rest[0])
    elif command == "list":
        if not rest:
            print("Usage: aetherc list <header_file>")
            return 0
        list_functions(rest[0])
    elif command == "scan":
        if not rest:
            print("Usage: aetherc scan <directory>")
            return 0
        scan_directory(rest[0])
    elif command == "help":
        print_usage()
    else:
        print(f"Unknown command: {command}")
        print_usage()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())