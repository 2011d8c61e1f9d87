"""Tests for projecting class declarations and their members."""

from cs_to_markdown.models import Declaration, Parameter
from cs_to_markdown.project_declaration import (
    base_types_of,
    iter_declarations,
    project_declaration,
)
from cs_to_markdown.syntax_tree import parse_source

SAMPLE = """
namespace Shop
{
    /// <summary>
    /// A parcel in transit.
    /// </summary>
    public class Parcel : Item, IShippable
    {
        /// <summary>Weight in grams.</summary>
        private int weight, volume;

        public List<string> Labels;

        /// <summary>Destination address.</summary>
        public string Address { get; set; }

        /// <summary>Sends the parcel.</summary>
        /// <exception cref="InvalidOperationException">when already sent</exception>
        public bool Send(string carrier, int retries = 3)
        {
            return true;
        }

        public void Reset() { }
    }
}
"""


def _parcel() -> Declaration:
    """Project the Parcel class of the sample."""
    tree = parse_source(SAMPLE)
    node = next(iter_declarations(tree.root_node, ["class_declaration"]))
    return project_declaration(node)


def test_declaration_header() -> None:
    """Verify name, base types and summary of the class."""
    decl = _parcel()
    assert decl.name == "Parcel"
    assert decl.base_types == ["Item", "IShippable"]
    assert decl.summary == "A parcel in transit."


def test_fields_take_first_variable_only() -> None:
    """Verify a multi-variable field yields only its first variable."""
    fields = _parcel().fields
    assert [(f.name, f.type_text) for f in fields] == [
        ("weight", "int"),
        ("Labels", "List<string>"),
    ]
    assert fields[0].summary == "Weight in grams."
    assert fields[1].summary == ""


def test_properties() -> None:
    """Verify properties carry type, name and summary."""
    props = _parcel().properties
    assert len(props) == 1
    assert props[0].kind == "Property"
    assert props[0].name == "Address"
    assert props[0].type_text == "string"
    assert props[0].summary == "Destination address."


def test_methods_in_source_order() -> None:
    """Verify methods keep declaration order and signatures."""
    methods = _parcel().methods
    assert [m.name for m in methods] == ["Send", "Reset"]
    send = methods[0]
    assert send.type_text == "bool"
    assert send.summary == "Sends the parcel."
    assert send.parameters == [
        Parameter(name="carrier", type_text="string", default=None),
        Parameter(name="retries", type_text="int", default="3"),
    ]
    assert send.exceptions == (
        'cref="InvalidOperationException" - when already sent'
    )
    assert methods[1].type_text == "void"
    assert methods[1].parameters == []


def test_no_base_list() -> None:
    """Verify a class without bases has an empty base list."""
    tree = parse_source("class Box { int Size; }")
    node = next(iter_declarations(tree.root_node, ["class_declaration"]))
    assert base_types_of(node) == []


def test_generic_base_type_text() -> None:
    """Verify generic base types keep their raw text."""
    tree = parse_source("class Bag : List<Item> { }")
    node = next(iter_declarations(tree.root_node, ["class_declaration"]))
    assert base_types_of(node) == ["List<Item>"]


def test_nested_classes_are_declarations_too() -> None:
    """Verify nested classes are found and outer members include theirs."""
    code = "class Outer { int A; class Inner { int B; } }"
    tree = parse_source(code)
    nodes = list(iter_declarations(tree.root_node, ["class_declaration"]))
    decls = [project_declaration(n) for n in nodes]
    assert [d.name for d in decls] == ["Outer", "Inner"]
    assert [f.name for f in decls[0].fields] == ["A", "B"]
    assert [f.name for f in decls[1].fields] == ["B"]


def test_struct_only_when_requested() -> None:
    """Verify declaration kinds filter which nodes are projected."""
    tree = parse_source("struct Point { int X; } class Box { }")
    classes = list(iter_declarations(tree.root_node, ["class_declaration"]))
    both = list(
        iter_declarations(tree.root_node, ["class_declaration", "struct_declaration"])
    )
    assert len(classes) == 1
    assert len(both) == 2


def test_parameters_with_modifiers_and_params_array() -> None:
    """Verify every parameter shape is kept in declaration order."""
    tree = parse_source(
        "static class Ext { static void M(this string s, ref int r, out int o, "
        "params object[] args, [In] int z = 2) { } }"
    )
    node = next(iter_declarations(tree.root_node, ["class_declaration"]))
    method = project_declaration(node).methods[0]
    assert method.parameters == [
        Parameter(name="s", type_text="string"),
        Parameter(name="r", type_text="int"),
        Parameter(name="o", type_text="int"),
        Parameter(name="args", type_text="object[]"),
        Parameter(name="z", type_text="int", default="2"),
    ]


def test_primary_constructor_base_keeps_arguments() -> None:
    """Verify base constructor arguments stay on their base type."""
    tree = parse_source("class A(int x) : B(x), IFoo { }")
    node = next(iter_declarations(tree.root_node, ["class_declaration"]))
    assert base_types_of(node) == ["B(x)", "IFoo"]
