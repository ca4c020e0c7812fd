# aetherbind

A small binding generator for the Aether language. It reads a C header
line by line, collects simple function declarations, `#define` constants
and `typedef struct` declarations, and writes an Aether source file that
wraps them.

## Installation

```
pip install .
```

## Command line

The package installs an `aetherc` command (also reachable as
`python -m aetherbind.cli`):

```
aetherc generate <header> <output.ae>   Parse a C header and write Aether bindings
aetherc parse <header>                  Show what was found in a header
aetherc list <header>                   List the functions in a header
aetherc scan <directory>                Count functions in every .h file below a directory
aetherc help                            Show usage
```

For example:

```
aetherc generate /usr/include/math.h packages/c/src/math.ae
aetherc scan /usr/include
```

When generating, the package name is taken from the directory after
`packages` in the output path (`packages/c/src/math.ae` gives `c`);
without one it defaults to `c`. Missing output directories are created.
If the header cannot be read, `generate` prints an error and exits with
status 1. Running `aetherc` with no arguments prints the usage summary;
an unknown command prints a message followed by the usage summary.

`scan` walks the directory in lexical order and prints one line for each
`.h` file that declares at least one function.

## Library use

```python
from aetherbind.header import parse_header_text
from aetherbind.model import CBinding
from aetherbind.generator import render_binding_file, map_c_type_to_aether

header = parse_header_text("int add(int a, int b);\n#define LIMIT 10\n", "mylib.h")
binding = CBinding.from_header(header, "mylib")
print(render_binding_file(binding))

map_c_type_to_aether("const char*")   # "string"
```

The modules:

- `aetherbind.model` holds the dataclasses `CParameter`, `CFunction`,
  `CConstant`, `CField`, `CType`, `CHeader` and `CBinding`;
  `CBinding.from_header(header, package_name)` builds a binding for one
  header.
- `aetherbind.header` parses headers: `parse_c_header(path)` reads a file
  (raising `OSError` if it cannot), `parse_header_text(text, path)` parses
  text already in hand, and `parse_function_declaration`,
  `parse_parameters`, `parse_constant_declaration`,
  `parse_type_declaration`, `parse_library_dependency`, `extract_comment`
  and `extract_header_name` handle single lines and names.
- `aetherbind.generator` renders output: `render_binding_file` and
  `write_binding_file` produce the form written by `aetherc generate`;
  `render_aether_bindings` and `generate_aether_bindings` produce a typed,
  package-style form built with `generate_function_wrapper` and
  `map_c_type_to_aether` (unknown C types map to `any`).
  `format_parameters` formats a parameter list the way `aetherc list`
  prints it, and `extract_package_name` derives the package name from an
  output path.
- `aetherbind.cli` holds `main` and the functions behind each command.

## Limitations

- There is no preprocessor: macros are not expanded and `#include`
  lines are not followed.
- Only one-line declarations are recognised, such as
  `int add(int a, int b);` or `#define MAX 10`; declarations spread over
  several lines are missed, and so are return types of more than one word
  (`unsigned int f(void);`).
- Structs are recorded by name only; their fields are not read, so the
  generated struct bodies are empty.
- `parse_library_dependency` recognises `#pragma comment(lib, "...")`
  lines, but header parsing does not use it, so a parsed header's library
  list is always empty and no `// Libraries:` line is written.

## Running the tests

```
pip install .[test]
pytest
```