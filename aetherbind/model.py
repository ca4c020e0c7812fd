"""Data model for parsed C headers and the bindings generated from them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CParameter:
    """A single parameter of a C function declaration."""

    name: str
    type: str


@dataclass
class CFunction:
    """A C function declaration."""

    name: str
    return_type: str
    parameters: list[CParameter] = field(default_factory=list)
    header: str = ""
    library: str = ""
    comment: str = ""


@dataclass
class CConstant:
    """A preprocessor constant (``#define NAME VALUE``)."""

    name: str
    value: str
    type: str = "int"


@dataclass
class CField:
    """A field of a C struct."""

    name: str
    type: str


@dataclass
class CType:
    """A C type declaration such as a typedef'd struct."""

    name: str
    type: str
    fields: list[CField] = field(default_factory=list)


@dataclass
class CHeader:
    """Everything extracted from one C header file."""

    name: str
    path: str
    functions: list[CFunction] = field(default_factory=list)
    constants: list[CConstant] = field(default_factory=list)
    types: list[CType] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)


@dataclass
class CBinding:
    """The material a binding file is generated from."""

    package_name: str
    headers: list[CHeader] = field(default_factory=list)
    functions: list[CFunction] = field(default_factory=list)
    constants: list[CConstant] = field(default_factory=list)
    types: list[CType] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)

    @classmethod
    def from_header(cls, header: CHeader, package_name: str) -> "CBinding":
        """Build a binding covering a single parsed header."""
        return cls(
            package_name=package_name,
            headers=[header],
            functions=list(header.functions),
            constants=list(header.constants),
            types=list(header.types),
            libraries=list(header.libraries),
            includes=[header.name],
        )