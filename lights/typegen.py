"""Parse type definition files and render them as C++ header source."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "DefinitionError",
    "FieldType",
    "NodeType",
    "Field",
    "Node",
    "DefinitionFile",
    "parse_field_type",
    "generate",
]

_INDENT = " " * 4

_HEADER_TEMPLATE = (
    "\n/**\n"
    "    * Generated by OZZ Typegen\n"
    "    * This file is auto-generated, do not edit manually.\n"
    "    * To regenerate, run the typegen tool with the appropriate definition file.\n"
    "    * Definition file: {name}\n"
    "*/\n"
    "#pragma once\n"
    "#include <ozz_binary/binary.h>\n"
    "#include <string>\n"
    "#include <vector>\n"
)


class DefinitionError(ValueError):
    """Raised when a definition file cannot be parsed."""


class FieldType(IntEnum):
    """The type of a struct field."""

    UNKNOWN = 0
    INT = 1
    FLOAT = 2
    DOUBLE = 3
    BOOL = 4
    STRING = 5
    GENERATED_TYPE = 6


class NodeType(IntEnum):
    """Whether a definition is a struct or an enum."""

    UNKNOWN = 0
    STRUCT = 1
    ENUM = 2


_PRIMITIVES = {
    "int": FieldType.INT,
    "float": FieldType.FLOAT,
    "double": FieldType.DOUBLE,
    "bool": FieldType.BOOL,
    "string": FieldType.STRING,
}

_RENDERED_TYPES = {
    FieldType.INT: "int",
    FieldType.FLOAT: "float",
    FieldType.DOUBLE: "double",
    FieldType.BOOL: "bool",
    FieldType.STRING: "std::string",
}


def parse_field_type(type_name: str) -> FieldType:
    """Map a type name to its field type; unknown names refer to generated types."""
    return _PRIMITIVES.get(type_name, FieldType.GENERATED_TYPE)


@dataclass
class Field:
    """A struct field or an enum value."""

    name: str
    type: FieldType = FieldType.UNKNOWN
    is_array: bool = False
    custom_type: str = ""


@dataclass
class Node:
    """A single struct or enum definition."""

    type: NodeType
    name: str
    fields: list[Field] = field(default_factory=list)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Node:
        """Parse one definition, consuming lines up to and including its closing brace."""
        lines = iter(lines)
        header = next(lines, "")

        node_type = NodeType.UNKNOWN
        name = ""
        for token in header.split():
            if token == "struct":
                node_type = NodeType.STRUCT
                continue
            if token == "enum":
                node_type = NodeType.ENUM
                continue
            if node_type is NodeType.UNKNOWN:
                break
            if token == "{":
                break
            name = token
            break
        if node_type is NodeType.UNKNOWN:
            raise DefinitionError(
                f"node type not specified in definition: {header.strip()!r}"
            )

        fields: list[Field] = []
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("//"):
                continue
            if line == "}":
                break
            tokens = line.split()
            if node_type is NodeType.ENUM:
                fields.append(Field(name=tokens[0]))
                continue

            type_name = tokens[0]
            field_type = parse_field_type(type_name)
            custom = type_name if field_type is FieldType.GENERATED_TYPE else ""
            if len(tokens) < 2:
                raise DefinitionError(f"field name is missing in line: {line!r}")
            if tokens[1] == "array":
                if len(tokens) < 3:
                    raise DefinitionError(
                        f"field name is missing after 'array' in line: {line!r}"
                    )
                fields.append(Field(tokens[2], field_type, True, custom))
            else:
                fields.append(Field(tokens[1], field_type, False, custom))

        return cls(type=node_type, name=name, fields=fields)

    def render(self) -> str:
        """Render the definition as C++ source."""
        if self.type is NodeType.STRUCT:
            parts = [f"struct {self.name} {{\n"]
        elif self.type is NodeType.ENUM:
            parts = [f"enum class {self.name} {{\n"]
        else:
            return "// Unknown node type\n"

        for item in self.fields:
            parts.append(_INDENT)
            if self.type is NodeType.ENUM:
                parts.append(f"{item.name},\n")
                continue
            if item.is_array:
                parts.append("std::vector<")
            if item.type is FieldType.GENERATED_TYPE:
                type_text = item.custom_type
            else:
                type_text = _RENDERED_TYPES.get(item.type)
            if type_text is None:
                parts.append("// Unknown field type\n")
                continue
            parts.append(f"{type_text} ")
            if item.is_array:
                parts.append("> ")
            parts.append(f"{item.name};\n")

        parts.append("};\n")
        return "".join(parts)


@dataclass
class DefinitionFile:
    """All definitions read from one definition file."""

    nodes: list[Node] = field(default_factory=list)
    name: str = ""

    @classmethod
    def parse(cls, text: str) -> DefinitionFile:
        """Parse every definition in ``text``, skipping blank lines and comments."""
        lines = iter(text.splitlines())
        nodes: list[Node] = []
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("//"):
                continue
            nodes.append(Node.parse(itertools.chain([line], lines)))
        return cls(nodes=nodes)

    def render(self) -> str:
        """Render the whole file as a C++ header."""
        body = "".join(f"\n\n{node.render()}" for node in self.nodes)
        return _HEADER_TEMPLATE.format(name=self.name) + body


def generate(definition: str) -> str:
    """Turn definition text into generated header source."""
    return DefinitionFile.parse(definition).render()