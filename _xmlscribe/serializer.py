# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar, Optional

from _xmlscribe.names import namespace_declaration_name, NamespaceResolver
from _xmlscribe.policy import (
    should_skip_empty_attribute,
    should_trim,
    SkipDecisions,
)
from _xmlscribe.writer import XMLWriter

if TYPE_CHECKING:
    from typing import Final

    from _xmlscribe.document import Document
    from _xmlscribe.nodes import Node
    from _xmlscribe.writer import MarkupSink


# constants


DEFAULT_XML_VERSION: Final = "1.0"

_DASH_TO_ESCAPE: Final = re.compile(r"-(?=-|\Z)")


# configuration


class DefaultRenderOptions:
    """
    This object's class variables are used to configure the rendering parameters that
    are applied when documents are coerced to :class:`str` objects. Hence it also
    applies when document objects are fed to the :func:`print` function.

    .. attention::

        Use this once to define behaviour on *application level*. For thread-safe
        renderings with diverging parameters pass a :class:`MarkupSink` to
        :meth:`Document.render`!
    """

    newline: ClassVar[Optional[str]] = None
    """
    See :class:`io.StringIO` for a detailed explanation of the parameter with the
    same name.
    """

    @classmethod
    def _get_writer(cls) -> XMLWriter:
        return XMLWriter(newline=cls.newline)

    @classmethod
    def reset_defaults(cls):
        """Restores the factory settings."""
        cls.newline = None


# comments


def sanitize_comment(comment: str) -> str:
    """
    Makes a string safe to be used as comment's content. Dashes that are followed by
    another or that end the string are escaped with a backslash.

    >>> sanitize_comment("a---b-")
    'a-\\\\-\\\\-b-\\\\'
    """
    return _DASH_TO_ESCAPE.sub(r"-\\", comment)


# renderer


class Renderer:
    """
    Walks a document's tree depth-first and emits the events that describe its markup
    to a sink.

    :param document: The document to render.
    :param sink: The :class:`MarkupSink` that receives the rendering events. It
                 defaults to an :class:`XMLWriter` that writes to a string buffer.

    The state that is needed to resolve namespaces and to decide which nodes are
    omitted is initialized for each pass. Thus a document can be rendered repeatedly,
    but a renderer instance must not be used by concurrent threads.
    """

    __slots__ = ("document", "_namespaces", "sink", "_skip_decisions")

    def __init__(self, document: Document, sink: Optional[MarkupSink] = None):
        self.document: Final = document
        self.sink: Final = DefaultRenderOptions._get_writer() if sink is None else sink
        self._namespaces: Optional[NamespaceResolver] = None
        self._skip_decisions: Optional[SkipDecisions] = None

    def render(self) -> str:
        """Renders the document and returns the markup from the sink."""
        self.write_document()
        return self.sink.output_as_string()

    def write_document(self):
        """Renders the document to the sink."""
        document = self.document
        sink = self.sink

        self._namespaces = NamespaceResolver(document.namespaces)
        self._skip_decisions = SkipDecisions(document)

        try:
            sink.open()
            if document.use_prolog:
                sink.start_document(
                    document.xml_version or DEFAULT_XML_VERSION,
                    document.encoding,
                    document.standalone_string,
                )
            sink.set_indent(document.use_indent, document.indent_string)

            for node in document.elements:
                self.render_node(node, top_level=True)

            sink.end_document()
        finally:
            self._namespaces = self._skip_decisions = None

    def render_node(self, node: Node, top_level: bool = False):
        """
        Emits the events for a node and its descendants. The root namespaces are
        declared on nodes that are rendered as top-level nodes.
        """
        assert self._namespaces is not None
        assert self._skip_decisions is not None

        if self._skip_decisions(node):
            return

        document = self.document
        sink = self.sink

        if node.pre_comment is not None:
            sink.write_comment(sanitize_comment(node.pre_comment))

        prefix, namespace = self._namespaces.resolve(node)
        assert node.tag_name is not None
        sink.open_element(prefix, node.tag_name, namespace)

        if top_level:
            for root_namespace, root_prefix in document.namespaces.items():
                self._write_attribute(
                    namespace_declaration_name(root_prefix), root_namespace
                )

        trim = should_trim(node, document)
        for name, value in node.attributes.items():
            if should_skip_empty_attribute(node, document, value):
                continue
            self._write_attribute(name, value.strip() if trim else value)

        if node.comment is not None:
            sink.write_comment(sanitize_comment(node.comment))

        if node.children:
            for child_node in node.children:
                self.render_node(child_node)
        elif node.value is not None:
            value = node.value.strip() if trim else node.value
            if node.is_cdata:
                sink.write_raw_cdata(value)
            else:
                sink.write_escaped_text(value)

        sink.close_element()

    def _write_attribute(self, name: str, value: str):
        self.sink.start_attribute(name)
        self.sink.write_text(value)
        self.sink.end_attribute()


__all__ = (
    DefaultRenderOptions.__name__,
    Renderer.__name__,
    sanitize_comment.__name__,
)
