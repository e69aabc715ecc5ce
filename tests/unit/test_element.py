import pytest
from lxml import etree

from junos_netconf.element import RpcElement
from junos_netconf.params import Params


def test_when_element_is_empty_then_it_is_self_closed():
    # GIVEN element without content
    element = RpcElement("lock-configuration")

    # WHEN rendering
    result = element.render()

    # THEN expect self-closed element
    assert result == "<lock-configuration/>"


def test_when_element_has_attributes_then_they_render_in_order():
    # GIVEN element with attributes
    element = RpcElement(
        "get-configuration",
        attributes=Params([("format", "text"), ("database", "candidate")]),
    )

    # WHEN rendering
    result = element.render()

    # THEN expect attributes in insertion order
    assert result == '<get-configuration format="text" database="candidate"/>'


def test_when_element_has_children_then_they_are_nested():
    # GIVEN element with children
    element = RpcElement("get-rollback-information")
    element.append(RpcElement("rollback", text="1"))
    element.append(RpcElement("compare", text="2"))

    # WHEN rendering
    result = element.render()

    # THEN expect children in order
    assert result == (
        "<get-rollback-information>"
        "<rollback>1</rollback>"
        "<compare>2</compare>"
        "</get-rollback-information>"
    )


def test_when_child_text_is_empty_then_child_is_self_closed():
    # GIVEN element with a flag style child
    element = RpcElement("commit-configuration")
    element.append(RpcElement("synchronize", text=""))

    # WHEN rendering
    result = element.render()

    # THEN expect self-closed child
    assert result == "<commit-configuration><synchronize/></commit-configuration>"


def test_when_rendering_text_then_xml_characters_are_escaped():
    # GIVEN element with text holding XML significant characters
    element = RpcElement("command", text="show log | match <foo> & bar")

    # WHEN rendering
    result = element.render()

    # THEN expect escaped text
    assert result == "<command>show log | match &lt;foo&gt; &amp; bar</command>"


@pytest.mark.parametrize(
    "markup",
    [
        "<system><host-name>r1</host-name></system>",
        "<interfaces/><system/>",
        "<system><host-name>a&amp;b</host-name></system>",
    ],
    ids=["single-root", "several-roots", "entity"],
)
def test_when_rendering_markup_then_nodes_are_kept_as_given(markup):
    # GIVEN element with XML markup
    element = RpcElement("configuration", markup=markup)

    # WHEN rendering
    result = element.render()

    # THEN expect markup nested unchanged
    assert result == f"<configuration>{markup}</configuration>"


def test_when_markup_is_malformed_then_parse_error_is_raised():
    # GIVEN element with malformed markup
    element = RpcElement("configuration", markup="<system>")

    # WHEN rendering
    with pytest.raises(etree.XMLSyntaxError):
        element.render()


def test_when_rendering_attribute_then_value_is_escaped():
    # GIVEN element with attribute holding XML significant characters
    element = RpcElement(
        "load-configuration", attributes=Params(url='http://x/c?a=1&b="2"')
    )

    # WHEN rendering
    result = element.render()

    # THEN expect escaped attribute value
    assert result == '<load-configuration url="http://x/c?a=1&amp;b=&quot;2&quot;"/>'


def test_when_building_element_then_lxml_tree_is_returned():
    # GIVEN element with attributes and children
    element = RpcElement("load-configuration", attributes=Params(action="set"))
    element.append(RpcElement("configuration-set", text="set system host-name r1"))

    # WHEN building the lxml element
    ele = element.to_ele()

    # THEN expect matching tree
    assert ele.tag == "load-configuration"
    assert ele.get("action") == "set"
    assert ele[0].tag == "configuration-set"
    assert ele[0].text == "set system host-name r1"
