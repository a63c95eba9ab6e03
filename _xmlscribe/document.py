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

from io import TextIOWrapper
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional

from _xmlscribe.nodes import _ElementContainer
from _xmlscribe.serializer import Renderer
from _xmlscribe.writer import XMLWriter

if TYPE_CHECKING:
    from typing import Final

    from _xmlscribe.nodes import Node
    from _xmlscribe.typing import NamespaceDeclarations, Self
    from _xmlscribe.writer import MarkupSink


DEFAULT_INDENT_STRING: Final = "    "


class Document(_ElementContainer):
    """
    This class is the container of a markup document's top-level nodes and holds the
    settings that apply to the whole document when it's rendered.

    :param encoding: The encoding that is declared in the XML declaration and that is
                     used by :meth:`Document.write`.

    >>> document = Document("UTF-8").add("language", "Bulgarian")
    >>> print(document, end="")
    <?xml version="1.0" encoding="UTF-8"?>
    <language>Bulgarian</language>

    Usually a document has a single top-level node, but that isn't enforced.

    Namespaces that are used across the document should be declared with
    :meth:`Document.add_namespace` respectively :meth:`Document.set_namespace` for
    the default namespace. These are declared on each top-level node and nodes that
    belong to them are rendered with their prefix only.
    """

    __slots__ = (
        "_elements",
        "encoding",
        "indent_string",
        "namespaces",
        "skip_empty_attributes",
        "skip_empty_tags",
        "standalone",
        "trim_values",
        "use_indent",
        "use_prolog",
        "xml_version",
    )

    def __init__(self, encoding: Optional[str] = None):
        self._elements: Final[list[Node]] = []
        self.xml_version: Optional[str] = None
        """ The XML version that is declared, ``1.0`` is used if it's unset. """
        self.encoding: Optional[str] = encoding
        self.standalone: Optional[bool] = None
        """ Whether the document is declared as standalone. """
        self.use_prolog = True
        """ Whether the rendered document starts with an XML declaration. """
        self.use_indent = True
        self.indent_string = DEFAULT_INDENT_STRING
        """ The string that is prepended to a line once per nesting level. """
        self.namespaces: dict[str, str] = {}
        """ The root namespaces, mapped to their prefixes. """
        self.trim_values = False
        """ Whether values and attribute values are stripped. """
        self.skip_empty_attributes = False
        """ Whether attributes with empty values are omitted. """
        self.skip_empty_tags = False
        """ Whether nodes without any content are omitted. """

    def __str__(self) -> str:
        return self.render()

    def _attach(self, node: Node):
        node._is_root = True

    # rendering

    def render(self, sink: Optional[MarkupSink] = None) -> str:
        """
        Renders the document's nodes to markup.

        :param sink: An alternative :class:`MarkupSink` to produce the markup.
        :return: The markup as string.
        """
        return Renderer(self, sink).render()

    generate_xml = render

    def save(self, path: Path | str, *, newline: Optional[str] = None):
        """
        Saves the rendered document to a file.

        :param path: The filesystem path to the target file.
        :param newline: See :class:`io.TextIOWrapper` for a detailed explanation of the
                        parameter with the same name.
        """
        with Path(path).open("bw") as file:
            self.write(file, newline=newline)

    def write(self, buffer: BinaryIO, *, newline: Optional[str] = None):
        """
        Writes the rendered document to a :term:`file-like object`. The text is
        encoded as declared by :attr:`Document.encoding` or as UTF-8 if it's unset.

        :param buffer: A :term:`file-like object` that the document is written to.
        :param newline: See :class:`io.TextIOWrapper` for a detailed explanation of the
                        parameter with the same name.
        """
        text_buffer = TextIOWrapper(
            buffer,
            encoding=self.encoding or "utf-8",
            errors="xmlcharrefreplace",
            newline=newline,
        )
        try:
            Renderer(self, XMLWriter(text_buffer)).write_document()
        finally:
            text_buffer.flush()
            # the buffer remains open for the caller
            text_buffer.detach()

    # declaration

    def set_encoding(self, encoding: Optional[str]) -> Self:
        self.encoding = encoding
        return self

    def set_xml_version(self, xml_version: Optional[str]) -> Self:
        self.xml_version = xml_version
        return self

    def set_standalone(self, flag: Optional[bool]) -> Self:
        self.standalone = flag
        return self

    def mark_as_standalone(self) -> Self:
        return self.set_standalone(True)

    def mark_as_not_standalone(self) -> Self:
        return self.set_standalone(False)

    @property
    def standalone_string(self) -> Optional[str]:
        """
        The value of the standalone declaration, :obj:`None` if it's not to be
        declared.
        """
        if self.standalone is None:
            return None
        return "yes" if self.standalone else "no"

    def set_use_prolog(self, flag: bool) -> Self:
        self.use_prolog = flag
        return self

    def skip_prolog(self) -> Self:
        return self.set_use_prolog(False)

    # formatting

    def set_indent(self, value: bool | str) -> Self:
        """
        Toggles the indentation with a boolean argument. A string enables it and is
        used as indentation string.
        """
        if isinstance(value, bool):
            self.use_indent = value
        else:
            self.use_indent = True
            self.set_indent_string(value)
        return self

    def set_indent_string(self, indent_string: str) -> Self:
        if not isinstance(indent_string, str):
            raise TypeError("The indentation must be a string.")
        self.indent_string = indent_string
        return self

    def no_indent(self) -> Self:
        return self.set_indent(False)

    # namespaces

    def add_namespace(self, uri: str, prefix: str) -> Self:
        """
        Declares a root namespace. Its declaration is rendered on the top-level nodes.

        :param uri: The namespace.
        :param prefix: The prefix for the namespace, an empty string declares the
                       default namespace.
        """
        self.namespaces[uri] = prefix
        return self

    def set_namespace(self, uri: str) -> Self:
        """Declares the default namespace."""
        return self.add_namespace(uri, "")

    def set_namespaces(self, namespaces: NamespaceDeclarations) -> Self:
        """Replaces all root namespaces with the given mapping of URIs to prefixes."""
        self.namespaces.clear()
        for uri, prefix in namespaces.items():
            self.add_namespace(uri, prefix)
        return self

    # policies

    def set_skip_empty_attributes(self, flag: bool = True) -> Self:
        self.skip_empty_attributes = flag
        return self

    def set_skip_empty_tags(self, flag: bool = True) -> Self:
        self.skip_empty_tags = flag
        return self

    def set_trim_values(self, flag: bool = True) -> Self:
        self.trim_values = flag
        return self


__all__ = (Document.__name__,)
