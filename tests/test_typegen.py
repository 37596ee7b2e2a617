import pytest

from lights.typegen import (
    DefinitionError,
    DefinitionFile,
    Field,
    FieldType,
    Node,
    NodeType,
    generate,
    parse_field_type,
)

STRUCT_DEF = """struct Player {
    int health
    float speed
    string array names
    Color tint
}
"""

ENUM_DEF = """enum Color {
    Red
    Green extra
}
"""

INCLUDES = "#pragma once\n#include <ozz_binary/binary.h>\n#include <string>\n#include <vector>\n"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("int", FieldType.INT),
        ("float", FieldType.FLOAT),
        ("double", FieldType.DOUBLE),
        ("bool", FieldType.BOOL),
        ("string", FieldType.STRING),
        ("Color", FieldType.GENERATED_TYPE),
        ("Int", FieldType.GENERATED_TYPE),
    ],
)
def test_parse_field_type(name, expected):
    assert parse_field_type(name) is expected


def test_struct_fields_are_parsed():
    node = Node.parse(STRUCT_DEF.splitlines())
    assert node.type is NodeType.STRUCT
    assert node.name == "Player"
    assert node.fields == [
        Field("health", FieldType.INT),
        Field("speed", FieldType.FLOAT),
        Field("names", FieldType.STRING, True),
        Field("tint", FieldType.GENERATED_TYPE, False, "Color"),
    ]


def test_struct_render():
    node = Node.parse(STRUCT_DEF.splitlines())
    assert node.render() == (
        "struct Player {\n"
        "    int health;\n"
        "    float speed;\n"
        "    std::vector<std::string > names;\n"
        "    Color tint;\n"
        "};\n"
    )


def test_enum_parse_and_render():
    node = Node.parse(ENUM_DEF.splitlines())
    assert node.type is NodeType.ENUM
    assert [f.name for f in node.fields] == ["Red", "Green"]
    assert node.render() == "enum class Color {\n    Red,\n    Green,\n};\n"


def test_parse_stops_after_closing_brace():
    lines = iter(["struct A {", "int x", "}", "after"])
    node = Node.parse(lines)
    assert [f.name for f in node.fields] == ["x"]
    assert next(lines) == "after"


def test_comments_and_blank_lines_inside_node_are_skipped():
    node = Node.parse(["struct A {", "", "   // note", "bool flag", "}"])
    assert node.fields == [Field("flag", FieldType.BOOL)]


def test_empty_struct_render():
    node = Node.parse(["struct Empty {", "}"])
    assert node.fields == []
    assert node.render() == "struct Empty {\n};\n"


def test_missing_node_type_raises():
    with pytest.raises(DefinitionError):
        Node.parse(["Player {", "int x", "}"])


def test_missing_field_name_raises():
    with pytest.raises(DefinitionError):
        Node.parse(["struct A {", "int", "}"])


def test_array_without_name_raises():
    with pytest.raises(ValueError):
        Node.parse(["struct A {", "int array", "}"])


def test_unknown_node_renders_marker():
    assert Node(NodeType.UNKNOWN, "X").render() == "// Unknown node type\n"


def test_unknown_field_type_renders_marker():
    node = Node(NodeType.STRUCT, "A", [Field("x", FieldType.UNKNOWN)])
    assert "// Unknown field type\n" in node.render()
    assert "x;" not in node.render()


def test_file_parses_multiple_nodes_with_comments():
    text = "// header comment\n\n" + STRUCT_DEF + "\n// between\n" + ENUM_DEF
    parsed = DefinitionFile.parse(text)
    assert [n.name for n in parsed.nodes] == ["Player", "Color"]
    assert [n.type for n in parsed.nodes] == [NodeType.STRUCT, NodeType.ENUM]


def test_file_parses_adjacent_nodes():
    parsed = DefinitionFile.parse(STRUCT_DEF + ENUM_DEF)
    assert [n.name for n in parsed.nodes] == ["Player", "Color"]


def test_generate_contains_header_and_nodes_in_order():
    text = STRUCT_DEF + "\n" + ENUM_DEF
    output = generate(text)
    parsed = DefinitionFile.parse(text)
    assert output == parsed.render()
    assert output.startswith("\n/**\n    * Generated by OZZ Typegen\n")
    assert INCLUDES in output
    first = output.index("\n\n" + parsed.nodes[0].render())
    second = output.index("\n\n" + parsed.nodes[1].render())
    assert first < second
    assert output.endswith(parsed.nodes[1].render())


def test_generate_empty_definition_has_only_header():
    output = generate("\n// nothing here\n")
    assert output.endswith(INCLUDES)
    assert "struct" not in output