# tests/dom/test_element_node.py
import pytest
from pydantic import ValidationError

from lighthtml.dom import DisplayType, ElementNode, ImageNode, TagClosingType, TextNode


def _br():
    return ElementNode("br", DisplayType.INLINE, TagClosingType.SELF_CLOSING)


@pytest.mark.parametrize("tag", ["div", "p", "span", "table", "h1"])
def test_empty_paired_element_renders_open_and_close_tag(tag):
    assert ElementNode(tag).to_html() == f"<{tag}></{tag}>"


def test_tag_name_is_lower_cased():
    node = ElementNode("DiV")
    assert node.tag_name == "div"
    assert node.to_html() == "<div></div>"


@pytest.mark.parametrize("tag", [None, "", "   "])
def test_missing_tag_name_fails_fast(tag):
    with pytest.raises(ValueError):
        ElementNode(tag)


def test_tag_name_is_read_only():
    node = ElementNode("div")
    with pytest.raises(ValidationError):
        node.tag_name = "span"


def test_defaults():
    node = ElementNode("div")
    assert node.display_type == DisplayType.BLOCK
    assert node.closing_type == TagClosingType.WITH_CLOSING_TAG
    assert node.children == []
    assert node.children_count == 0


def test_scenario_nested_div_with_classes():
    """Het voorbeeld uit de documentatie: div met twee classes en een paragraaf."""
    html = (
        ElementNode("div")
        .add_class("a")
        .add_class("b")
        .add_child(ElementNode("p").add_text("hi"))
        .to_html()
    )
    assert html == '<div class="a b"><p>hi</p></div>'


def test_self_closing_with_attribute():
    assert _br().add_attribute("x", "1").to_html() == '<br x="1"/>'


def test_duplicate_and_blank_classes_are_ignored():
    node = ElementNode("div").add_class("b").add_class("a").add_class("b").add_class("  ").add_class(None)
    assert node.css_classes == ["b", "a"]


def test_attributes_keep_insertion_order_and_last_write_wins():
    node = (
        ElementNode("input", closing_type=TagClosingType.SELF_CLOSING)
        .add_attribute("type", "text")
        .add_attribute("name", "q")
        .add_attribute("type", "search")
    )
    assert node.to_html() == '<input type="search" name="q"/>'


def test_blank_attribute_name_is_ignored_and_none_value_becomes_empty():
    node = ElementNode("a").add_attribute("", "x").add_attribute(" ", "y").add_attribute("href", None)
    assert node.attributes == {"href": ""}
    assert node.to_html() == '<a href=""></a>'


def test_class_attribute_is_appended_after_explicit_attributes():
    node = ElementNode("div").add_class("c1").add_attribute("id", "main")
    assert node.to_html() == '<div id="main" class="c1"></div>'


def test_explicit_class_attribute_merges_with_class_list():
    """Een expliciet class-attribuut mag nooit tot een dubbel class-attribuut leiden."""
    node = (
        ElementNode("div")
        .add_attribute("class", "explicit")
        .add_attribute("id", "x")
        .add_class("c1")
        .add_class("c2")
    )
    html = node.to_html()
    assert html == '<div id="x" class="explicit c1 c2"></div>'
    assert html.count("class=") == 1


def test_explicit_class_attribute_without_class_list_renders_in_place():
    node = ElementNode("div").add_attribute("class", "only").add_attribute("id", "x")
    assert node.to_html() == '<div class="only" id="x"></div>'


def test_add_child_ignores_none():
    node = ElementNode("div").add_child(None)
    assert node.children_count == 0


def test_self_closing_element_drops_children():
    node = _br()
    before = node.to_html()
    node.add_child(ElementNode("span")).add_text("hello").add_child(TextNode("x"))

    assert node.children == []
    assert node.inner_html() == ""
    assert node.to_html() == before == "<br/>"


def test_add_text_ignores_none_and_empty():
    node = ElementNode("p").add_text(None).add_text("")
    assert node.children_count == 0
    node.add_text(" ")
    assert node.to_html() == "<p> </p>"


def test_inner_html_concatenates_children_in_order():
    node = (
        ElementNode("p")
        .add_text("Hello, ")
        .add_child(ElementNode("b").add_text("world"))
        .add_child(_br())
        .add_text("!")
    )
    assert node.inner_html() == "Hello, <b>world</b><br/>!"


def test_text_is_rendered_verbatim():
    node = ElementNode("p").add_text("a < b & c")
    assert node.to_html() == "<p>a < b & c</p>"


def test_builders_return_the_same_node():
    node = ElementNode("div")
    assert node.add_class("x") is node
    assert node.add_attribute("id", "y") is node
    assert node.add_child(None) is node
    assert node.add_text("z") is node


def test_display_type_does_not_affect_serialization():
    block = ElementNode("span", DisplayType.BLOCK).add_text("t")
    inline = ElementNode("span", DisplayType.INLINE).add_text("t")
    assert block.to_html() == inline.to_html()


def test_formatted_html_indents_two_spaces_per_level():
    tree = (
        ElementNode("div")
        .add_class("a")
        .add_child(ElementNode("p").add_text("hi"))
        .add_child(_br())
    )
    assert tree.to_formatted_html() == (
        '<div class="a">\n'
        '  <p>\n'
        '    hi\n'
        '  </p>\n'
        '  <br/>\n'
        '</div>\n'
    )


def test_formatted_html_with_starting_indent_and_image_child():
    tree = ElementNode("div").add_child(ImageNode("/nope.png", "alt"))
    assert tree.to_formatted_html(1) == (
        '  <div>\n'
        '    <img src="/nope.png" alt="alt"/>\n'
        '  </div>\n'
    )


def test_iter_nodes_and_find_images():
    first = ImageNode("/a.png")
    second = ImageNode("https://example.com/b.png")
    inner = ElementNode("div").add_child(second)
    root = ElementNode("body").add_text("intro").add_child(first).add_child(inner)

    nodes = list(root.iter_nodes())
    assert nodes[0] is root
    assert len(nodes) == 5
    assert root.find_images() == [first, second]


def test_text_node_none_becomes_empty_string():
    node = TextNode(None)
    assert node.text == ""
    assert node.to_html() == ""
    assert node.inner_html() == ""


def test_text_node_is_immutable():
    node = TextNode("x")
    with pytest.raises(ValidationError):
        node.text = "y"


# --- Tree invariants cannot be bypassed ---

@pytest.mark.parametrize("kwargs", [
    {"children": [TextNode("x")]},
    {"css_classes": ["a", "a"]},
    {"attributes": {"id": "x"}},
])
def test_constructor_only_accepts_identity_fields(kwargs):
    """Children, classes en attributen gaan alleen via de builder-methodes."""
    with pytest.raises(TypeError):
        ElementNode("div", **kwargs)


def test_model_validate_rejects_smuggled_children():
    with pytest.raises(ValidationError):
        ElementNode.model_validate({
            "tag_name": "br",
            "closing_type": TagClosingType.SELF_CLOSING,
            "children": [TextNode("x")],
        })


@pytest.mark.parametrize("field, value", [
    ("closing_type", TagClosingType.SELF_CLOSING),
    ("display_type", DisplayType.INLINE),
])
def test_closing_and_display_type_are_read_only(field, value):
    node = ElementNode("div").add_text("hi")
    with pytest.raises(ValidationError):
        setattr(node, field, value)
    assert node.to_html() == "<div>hi</div>"


def test_exposed_collections_are_copies():
    node = ElementNode("div").add_class("a").add_attribute("id", "x").add_text("hi")

    node.css_classes.append("a")
    node.attributes["id"] = "changed"
    node.children.append(ImageNode("/a.png"))

    assert node.css_classes == ["a"]
    assert node.attributes == {"id": "x"}
    assert node.children_count == 1
    assert node.to_html() == '<div id="x" class="a">hi</div>'
    assert node.find_images() == []


def test_self_closing_element_walks_only_itself():
    br = _br().add_child(ImageNode("/a.png")).add_child(ElementNode("span"))
    assert list(br.iter_nodes()) == [br]
    assert br.find_images() == []
