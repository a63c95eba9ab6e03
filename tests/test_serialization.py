from textwrap import dedent

import pytest
from lxml import etree

from xmlscribe import (
    Document,
    MarkupSink,
    Node,
    Renderer,
    sanitize_comment,
    XMLWriter,
)


TEST_NAMESPACE = "https://test.com"


class RecordingSink(MarkupSink):
    def __init__(self):
        self.events = []

    def open(self):
        self.events.append(("open",))

    def start_document(self, version, encoding, standalone):
        self.events.append(("start_document", version, encoding, standalone))

    def set_indent(self, enabled, indent_string):
        self.events.append(("set_indent", enabled, indent_string))

    def open_element(self, prefix, tag_name, namespace_uri):
        self.events.append(("open_element", prefix, tag_name, namespace_uri))

    def start_attribute(self, name):
        self.events.append(("start_attribute", name))

    def write_text(self, value):
        self.events.append(("write_text", value))

    def end_attribute(self):
        self.events.append(("end_attribute",))

    def write_escaped_text(self, value):
        self.events.append(("write_escaped_text", value))

    def write_raw_cdata(self, value):
        self.events.append(("write_raw_cdata", value))

    def write_comment(self, value):
        self.events.append(("write_comment", value))

    def close_element(self):
        self.events.append(("close_element",))

    def end_document(self):
        self.events.append(("end_document",))

    def output_as_string(self):
        return repr(self.events)


# the end-to-end scenarios


def test_empty_document(document):
    assert document.render() == '<?xml version="1.0"?>\n'


def test_empty_root_node(document):
    assert document.add("book").render() == '<?xml version="1.0"?>\n<book/>\n'


def test_skipped_root_node(document):
    document.set_skip_empty_tags().add("book")
    assert document.render() == '<?xml version="1.0"?>\n'


def test_custom_namespace_at_different_positions(plain_document):
    plain_document.add(
        "root",
        lambda root: root.add_node(Node("a").set_namespace(TEST_NAMESPACE)).add(
            "b", lambda b: b.add_node(Node("c").set_namespace(TEST_NAMESPACE))
        ),
    )
    out = plain_document.render()

    assert out == (
        '<root><ns1:a xmlns:ns1="https://test.com"/>'
        '<b><ns1:c xmlns:ns1="https://test.com"/></b></root>\n'
    )

    root = etree.fromstring(out)
    assert [e.tag for e in root.iter()] == [
        "root",
        "{https://test.com}a",
        "b",
        "{https://test.com}c",
    ]
    assert {e.prefix for e in root.iter() if e.tag.startswith("{")} == {"ns1"}


def test_trimmed_value(plain_document):
    plain_document.set_trim_values().add("a", "  hi  ")
    assert plain_document.render() == "<a>hi</a>\n"


def test_cdata_value(plain_document):
    plain_document.add_node(Node("a", "<b>x</b>").cdata())
    out = plain_document.render()

    assert out == "<a><![CDATA[<b>x</b>]]></a>\n"
    assert etree.fromstring(out).text == "<b>x</b>"


# content


def test_content_exclusivity(plain_document):
    with pytest.warns(UserWarning):
        plain_document.add("a", lambda a: a.set_text("hidden").add("b"))

    out = plain_document.render()
    assert out == "<a><b/></a>\n"
    assert "hidden" not in out


def test_empty_string_value(plain_document):
    assert plain_document.add("a", "").render() == "<a></a>\n"


def test_escaping(plain_document):
    plain_document.add_node(Node("a", 'x < y & "z"').add_attribute("q", '"<&>"'))
    out = plain_document.render()

    assert out == '<a q="&quot;&lt;&amp;&gt;&quot;">x &lt; y &amp; "z"</a>\n'
    root = etree.fromstring(out)
    assert root.text == 'x < y & "z"'
    assert root.get("q") == '"<&>"'


def test_cdata_terminator(plain_document):
    plain_document.add_node(Node("a", "]]>").cdata())
    assert etree.fromstring(plain_document.render()).text == "]]>"


def test_trimmed_cdata(plain_document):
    plain_document.add_node(Node("a", " <b/> ").cdata().trim())
    assert plain_document.render() == "<a><![CDATA[<b/>]]></a>\n"


# attributes


def test_attribute_order(plain_document):
    plain_document.add_node(Node("a").add_attribute("z", "1").add_attribute("a", "2"))
    assert plain_document.render() == '<a z="1" a="2"/>\n'


def test_skip_empty_attributes(plain_document):
    plain_document.set_skip_empty_attributes().add_node(
        Node("a").add_attribute("x", "").add_attribute("y", " ").add_attribute("z", "1")
    )
    assert plain_document.render() == '<a z="1"/>\n'


def test_keep_empty_attributes_locally(plain_document):
    plain_document.set_skip_empty_attributes().add_node(
        Node("a").skip_empty_attributes(False).add_attribute("x", "")
    )
    assert plain_document.render() == '<a x=""/>\n'


def test_trimmed_attributes(plain_document):
    plain_document.add_node(Node("a").trim().add_attribute("x", " 1 "))
    assert plain_document.render() == '<a x="1"/>\n'


def test_globally_trimmed_attributes(plain_document):
    plain_document.set_trim_values().add_node(Node("a").add_attribute("x", " 1 "))
    assert plain_document.render() == '<a x="1"/>\n'


# skipping


def test_skipped_children(plain_document):
    plain_document.set_skip_empty_tags().add(
        "a", lambda a: a.add("b").add("c", "x").add("d", lambda d: d.add("e"))
    )
    assert plain_document.render() == "<a><c>x</c></a>\n"


def test_skipped_node_drops_its_comments(plain_document):
    plain_document.set_skip_empty_tags().add_node(
        Node("a").set_pre_comment("before").set_comment("inside")
    )
    assert plain_document.render() == ""


# namespaces


def test_root_namespaces(plain_document):
    plain_document.set_namespace("https://example.com").add_namespace(
        "https://somesite.com", "ex"
    ).add_node(Node("a").add_attribute("x", "1"))
    assert plain_document.render() == (
        '<a xmlns="https://example.com" xmlns:ex="https://somesite.com" x="1"/>\n'
    )


def test_root_namespaces_on_each_top_level_node(document):
    document.skip_prolog().set_namespace("https://example.com").add("a").add("b")
    assert document.render() == (
        '<a xmlns="https://example.com"/>\n<b xmlns="https://example.com"/>\n'
    )


def test_prefixed_root_namespace(plain_document):
    plain_document.add_namespace("https://somesite.com", "ex").add(
        "a", lambda a: a.add_node(Node("b").set_namespace("https://somesite.com"))
    )
    out = plain_document.render()

    assert out == '<a xmlns:ex="https://somesite.com"><ex:b/></a>\n'
    assert etree.fromstring(out)[0].tag == "{https://somesite.com}b"


def test_requested_prefix_of_root_namespace(plain_document):
    plain_document.add_namespace("https://a.com", "ex").add_node(
        Node("r").set_namespace("https://b.com", "ex")
    )
    out = plain_document.render()

    assert out == '<ns1:r xmlns:ns1="https://b.com" xmlns:ex="https://a.com"/>\n'
    assert etree.fromstring(out).tag == "{https://b.com}r"


def test_root_namespaces_only_at_top_level(plain_document):
    shared = Node("s", "x")
    plain_document.set_namespace("https://a.com").add_node(
        Node("r").add_node(shared)
    ).add_node(shared)
    assert plain_document.render() == (
        '<r xmlns="https://a.com"><s>x</s></r><s xmlns="https://a.com">x</s>\n'
    )


def test_explicit_prefix(plain_document):
    plain_document.add_node(Node("a").set_namespace(TEST_NAMESPACE, "t"))
    assert plain_document.render() == '<t:a xmlns:t="https://test.com"/>\n'


def test_generated_prefixes_in_document_order(plain_document):
    plain_document.add(
        "root",
        lambda root: root.add_node(Node("a").set_namespace("https://a.com"))
        .add_node(Node("b").set_namespace("https://b.com"))
        .add_node(Node("c").set_namespace("https://a.com")),
    )
    root = etree.fromstring(plain_document.render())
    assert [e.prefix for e in root] == ["ns1", "ns2", "ns1"]


def test_repeated_renderings_are_equal(plain_document):
    plain_document.add_node(Node("a").set_namespace(TEST_NAMESPACE))
    assert plain_document.render() == plain_document.render()
    assert "ns1:a" in plain_document.render()


def test_namespaces_are_parsed_back(sample_document):
    root = etree.fromstring(sample_document.render().encode("utf-8"))

    assert root.nsmap == {None: "https://example.com", "ex": "https://somesite.com"}
    book = root.find("{https://example.com}book")
    assert book.get("id") == "1"
    assert book.findtext("{https://example.com}title") == "Zazie dans le métro"


# comments


@pytest.mark.parametrize(
    ("comment", "out"),
    (
        ("", ""),
        ("a-b", "a-b"),
        ("-", "-\\"),
        ("--", "-\\-\\"),
        ("a---b-", "a-\\-\\-b-\\"),
        ("a -- b", "a -\\- b"),
    ),
)
def test_sanitize_comment(comment, out):
    assert sanitize_comment(comment) == out


@pytest.mark.parametrize("comment", ("a---b-", "----", "-a-", "a\\-"))
def test_sanitized_comment_properties(comment):
    sanitized = sanitize_comment(comment)
    assert sanitize_comment(sanitized) == sanitized
    assert "--" not in sanitized
    assert not sanitized.endswith("-")


def test_comments(plain_document):
    plain_document.add_node(
        Node("a", "text").set_comment("in--side").set_pre_comment("before-")
    )
    out = plain_document.render()

    assert out == "<!--before-\\--><a><!--in-\\-side-->text</a>\n"
    etree.fromstring(f"<x>{out}</x>")


def test_comment_in_empty_node(plain_document):
    assert (
        plain_document.add_node(Node("a").set_comment("c")).render()
        == "<a><!--c--></a>\n"
    )


@pytest.mark.parametrize(
    "node",
    (
        Node("a").set_comment("c").add("b"),
        Node("a").add_node(Node("b").set_pre_comment("c")),
    ),
)
def test_unindented_comment_before_elements(plain_document, node):
    assert plain_document.add_node(node).render() == "<a><!--c--><b/></a>\n"


def test_indented_comments(document):
    document.skip_prolog().add_node(
        Node("a").set_comment("c").add_node(Node("b", "x").set_pre_comment("p"))
    )
    assert document.render() == dedent(
        """\
        <a>
            <!--c-->
            <!--p-->
            <b>x</b>
        </a>
        """
    )


# formatting


def test_indentation(sample_document):
    assert sample_document.render() == dedent(
        """\
        <?xml version="1.0" encoding="UTF-8"?>
        <library xmlns="https://example.com" xmlns:ex="https://somesite.com">
            <book id="1">
                <title>Zazie dans le métro</title>
                <author>Raymond Queneau</author>
            </book>
        </library>
        """
    )


@pytest.mark.parametrize(
    ("indent", "out"),
    (
        ("\t", "<a>\n\t<b>\n\t\t<c/>\n\t</b>\n</a>\n"),
        (".", "<a>\n.<b>\n..<c/>\n.</b>\n</a>\n"),
        (False, "<a><b><c/></b></a>\n"),
    ),
)
def test_indent_strings(document, indent, out):
    document.skip_prolog().set_indent(indent).add(
        "a", lambda a: a.add("b", lambda b: b.add("c"))
    )
    assert document.render() == out


def test_sibling_indentation(document):
    document.skip_prolog().add("a", lambda a: a.add("b", "x").add("c"))
    assert document.render() == "<a>\n    <b>x</b>\n    <c/>\n</a>\n"


# renderer


def test_renderer_events(plain_document):
    plain_document.set_namespace("https://example.com").add_node(
        Node("a", "v").add_attribute("x", "1")
    )
    sink = RecordingSink()
    Renderer(plain_document, sink).write_document()

    assert sink.events == [
        ("open",),
        ("set_indent", False, "    "),
        ("open_element", None, "a", None),
        ("start_attribute", "xmlns"),
        ("write_text", "https://example.com"),
        ("end_attribute",),
        ("start_attribute", "x"),
        ("write_text", "1"),
        ("end_attribute",),
        ("write_escaped_text", "v"),
        ("close_element",),
        ("end_document",),
    ]


def test_renderer_events_with_prolog(document):
    sink = RecordingSink()
    document.set_encoding("UTF-8").render(sink)
    assert sink.events[:2] == [("open",), ("start_document", "1.0", "UTF-8", None)]


def test_render_to_given_writer(plain_document):
    writer = XMLWriter()
    assert plain_document.add("a").render(writer) == writer.output_as_string()
