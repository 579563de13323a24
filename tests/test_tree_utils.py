"""Search and tree editing tests"""
import pytest

from minihtml import Element, Text, parse
from minihtml.dom import (
    find_by_attribute,
    find_by_tag,
    get_elements_by_class_name,
    get_elements_by_id,
    query_selector,
    tree_to_list,
)

PAGE = (
    '<div id="main" class="box wide">'
    '<a href="/one" class="link">one</a>'
    '<a href="/two">two</a>'
    '<p class="boxed"><span id="s1" data="1"></span></p>'
    "</div>"
)


@pytest.fixture
def root():
    return parse(PAGE)


def test_find_by_tag_is_case_insensitive(root):
    assert [el.attributes["href"] for el in find_by_tag(root, "A")] == ["/one", "/two"]


def test_find_by_tag_includes_root(root):
    assert find_by_tag(root, "document") == [root]


def test_find_by_attribute_presence(root):
    assert [el.tag for el in find_by_attribute(root, "href")] == ["a", "a"]


def test_find_by_attribute_value(root):
    found = find_by_attribute(root, "href", "/two")
    assert len(found) == 1
    assert found[0].attributes["href"] == "/two"
    assert find_by_attribute(root, "href", "/three") == []


def test_class_lookup_matches_whole_tokens(root):
    assert [el.tag for el in get_elements_by_class_name(root, "box")] == ["div"]
    assert [el.tag for el in get_elements_by_class_name(root, "wide")] == ["div"]
    assert [el.tag for el in get_elements_by_class_name(root, "boxed")] == ["p"]


def test_id_lookup(root):
    assert [el.tag for el in get_elements_by_id(root, "s1")] == ["span"]
    assert get_elements_by_id(root, "nope") == []


def test_query_selector(root):
    assert [el.tag for el in query_selector(root, ".link")] == ["a"]
    assert [el.tag for el in query_selector(root, "#main")] == ["div"]
    assert len(query_selector(root, "a")) == 2
    assert root.query_selector("span")[0].attributes["id"] == "s1"


def test_query_selector_rejects_empty(root):
    with pytest.raises(ValueError):
        query_selector(root, "  ")


def test_element_methods_delegate(root):
    assert len(root.find_by_tag("a")) == 2
    assert root.find_by_attribute("data", "1")[0].tag == "span"
    assert set(root.build_id_index()) == {"main", "s1"}


def test_tree_to_list_is_preorder(root):
    assert [node.tag for node in tree_to_list(root)] == ["document", "div", "a", "a", "p", "span"]


def test_add_child(root):
    div = root.children[0]
    child = div.add_child("SECTION", {"id": "new"})
    assert child.tag == "section"
    assert child.parent is div
    assert div.children[-1] is child
    assert root.build_id_index()["new"] is child


def test_remove_child(root):
    div = root.children[0]
    first_link = div.children[0]
    div.remove_child(first_link)
    assert first_link not in div.children
    assert first_link.parent is None
    assert [el.attributes["href"] for el in find_by_tag(root, "a")] == ["/two"]


def test_remove_child_uses_identity():
    parent = Element("ul")
    first = parent.add_child("li")
    second = parent.add_child("li")
    parent.remove_child(second)
    assert parent.children == [first]
    assert parent.children[0] is first


def test_remove_non_child_raises(root):
    with pytest.raises(ValueError):
        root.remove_child(Element("p"))


def test_inner_text_setter_inserts_text_node():
    p = Element("p")
    p.add_child("b")
    p.inner_text = "hello"
    assert isinstance(p.children[0], Text)
    assert p.children[0].parent is p
    assert p.inner_text == "hello"


def test_inner_text_setter_replaces_first_text():
    root = parse("<p>old<b>bold</b></p>", include_text=True)
    p = root.children[0]
    p.inner_text = "new"
    assert p.inner_text == "newbold"
    assert len(p.children) == 2


def test_element_str_and_repr():
    el = Element("a", {"href": "x", "class": "y"})
    assert repr(el) == "<a>"
    assert str(el) == '<a href="x" class="y">'


def test_depth():
    root = parse("<a><b><c></c></b></a>")
    c = find_by_tag(root, "c")[0]
    assert c.depth == 3
    assert root.depth == 0


def test_inner_text_on_deeply_nested_tree():
    root = parse("<b>x" * 5000, include_text=True)
    assert root.inner_text == "x" * 5000
