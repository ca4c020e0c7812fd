"""Rendering of Aether binding files from parsed C declarations."""

from __future__ import annotations

import os
from pathlib import Path

from .model import CBinding, CFunction, CParameter

_TYPE_MAP = {
    "int": "int",
    "int32_t": "int",
    "long": "long",
    "int64_t": "long",
    "float": "float",
    "double": "double",
    "char*": "string",
    "const char*": "string",
    "void": "",
}


def map_c_type_to_aether(c_type: str) -> str:
    """Map a C type name to its Aether counterpart (``any`` if unknown)."""
    return _TYPE_MAP.get(c_type.lower(), "any")


def generate_function_wrapper(function: CFunction) -> str:
    """Render a typed wrapper that forwards to the C function."""
    params = ", ".join(
        f"{p.name} {map_c_type_to_aether(p.type)}" for p in function.parameters
    )
    names = ", ".join(p.name for p in function.parameters)
    return_type = map_c_type_to_aether(function.return_type)
    return (
        f"func {function.name}({params}) {return_type} {{\n"
        f"\treturn C.{function.name}({names})\n"
        f"}}"
    )


def render_aether_bindings(binding: CBinding) -> str:
    """Render a typed Aether package that imports C."""
    out = [f'package {binding.package_name}\n\nimport "C"\n\n']
    for function in binding.functions:
        out.append("\n")
        if function.comment:
            out.append(f"\n{function.comment}\n")
        out.append(f"\n{generate_function_wrapper(function)}\n\n")
    out.append("\n\n")
    for constant in binding.constants:
        out.append(f"\nconst {constant.name} = {constant.value}\n")
    out.append("\n\n")
    for ctype in binding.types:
        out.append(f"\ntype {ctype.name} struct {{\n")
        for fld in ctype.fields:
            out.append(f"\n\t{fld.name} {map_c_type_to_aether(fld.type)}\n")
        out.append("\n}\n")
    out.append("\n")
    return "".join(out)


def generate_aether_bindings(binding: CBinding, output_path: str) -> None:
    """Write the typed Aether package to ``output_path``."""
    Path(output_path).write_text(render_aether_bindings(binding), encoding="utf-8")


def _argument_names(params: list[CParameter]) -> str:
    return ", ".join(p.name for p in params)


def render_binding_file(binding: CBinding) -> str:
    """Render the binding file written by the ``generate`` command."""
    out = [
        "// Aether C Bindings\n// Generated by aetherc from ",
        "".join(f"{h.name} " for h in binding.headers),
        f"\n// Package: {binding.package_name}\n\n",
    ]
    for header in binding.headers:
        out.append(f"\n// #include <{header.name}>\n")
    out.append("\n\n")
    for function in binding.functions:
        args = _argument_names(function.parameters)
        out.append(
            f"\nfunc {function.name}({args}) {{\n"
            f"    return c_{function.name}({args})\n}}\n"
        )
    out.append("\n\n")
    for constant in binding.constants:
        out.append(f"\nconst {constant.name} = {constant.value}\n")
    out.append("\n\n")
    for ctype in binding.types:
        out.append(f"\nstruct {ctype.name} {{\n    ")
        for fld in ctype.fields:
            out.append(f"\n    {fld.type} {fld.name}\n    ")
        out.append("\n}\n")
    out.append("\n\n")
    if binding.libraries:
        libs = "".join(f"-l{lib} " for lib in binding.libraries)
        out.append(f"\n// Libraries: {libs}\n")
    out.append("\n")
    return "".join(out)


def write_binding_file(binding: CBinding, output_path: str) -> None:
    """Write the binding file, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_binding_file(binding), encoding="utf-8")


def format_parameters(params: list[CParameter]) -> str:
    """Format parameters C-style for display; empty lists show as ``void``."""
    if not params:
        return "void"
    return ", ".join(
        "..." if p.name == "..." else f"{p.type} {p.name}" for p in params
    )


def extract_package_name(output_path: str) -> str:
    """Return the directory after ``packages`` in a path, defaulting to ``c``."""
    parts = output_path.split(os.sep)
    for part, following in zip(parts, parts[1:]):
        if part == "packages":
            return following
    return "c"