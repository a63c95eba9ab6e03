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

import warnings
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from _xmlscribe.exceptions import InvalidValueKind
from _xmlscribe.plugins import plugin_manager
from _xmlscribe.typing import Tristate

if TYPE_CHECKING:
    from typing import Final

    from _xmlscribe.typing import Self, ValueProducer


IGNORED_VALUE_MESSAGE: Final = (
    "The node <{}> has child nodes and a value, the value will be ignored when it's "
    "rendered."
)


def _validate_name(name: Any, kind: str = "tag") -> str:
    if not isinstance(name, str):
        raise TypeError(f"A {kind} name must be a string.")
    if not name or any(c.isspace() for c in name):
        raise ValueError(f"Invalid {kind} name: {name!r}")
    return name


class _ElementContainer:
    """
    The shared behaviour of documents and nodes as containers of an ordered sequence
    of nodes.
    """

    __slots__ = ()

    _elements: list[Node]

    def _attach(self, node: Node):
        pass

    def add(self, tag_name: str, value: Any = None) -> Self:
        """
        Creates a new node and appends it to the contained nodes.

        :param tag_name: The new node's tag name.
        :param value: Anything the registered value producers can make sense of. By
                      default that's a string that is used as text content, an
                      :class:`XMLSerializable` object or a callable that is called with
                      the new node as argument.
        :return: The object this method was called on.

        >>> book = Node("book").add("title", "Zazie")
        >>> book.children[0].value
        'Zazie'
        """
        return self.add_node(Node(tag_name, value))

    def add_node(self, node: Node) -> Self:
        """
        Appends a node to the contained nodes.

        :param node: A :class:`Node` instance.
        :return: The object this method was called on.
        """
        if not isinstance(node, Node):
            raise TypeError("Only Node instances can be added.")
        self._attach(node)
        self._elements.append(node)
        return self

    @property
    def elements(self) -> list[Node]:
        """The contained nodes in document order."""
        return self._elements


class Node(_ElementContainer):
    """
    A node represents an element of a markup document. It has a tag name and either a
    textual value or a sequence of child nodes. If both are set, the value is ignored
    when the node is rendered.

    :param tag_name: The node's tag name, it must not contain whitespace.
    :param value: A value that is processed as described for :meth:`Node.add`.

    The methods that alter a node return the very same instance, so calls can be
    chained:

    >>> node = Node("title", " Zazie dans le métro ").trim().add_attribute("lang", "fr")
    >>> node.attributes
    {'lang': 'fr'}

    The policies regarding trimming and the omission of empty content are defined on
    the :class:`Document` level. Nodes can override these with the respective methods,
    passing :obj:`None` restores the document's authority.
    """

    __slots__ = (
        "attributes",
        "comment",
        "_elements",
        "is_cdata",
        "_is_root",
        "namespace_prefix",
        "namespace_uri",
        "pre_comment",
        "skip_empty_attributes_override",
        "skip_tag_if_empty_override",
        "tag_name",
        "trim_override",
        "value",
    )

    def __init__(self, tag_name: Optional[str] = None, value: Any = None):
        self.tag_name: Optional[str] = None
        """ The name of the node's tag, without a prefix. """
        self.value: Optional[str] = None
        """ The textual content, it's ignored when the node has child nodes. """
        self.attributes: Final[dict[str, str]] = {}
        """ The node's attributes in the order they were added. """
        self._elements: Final[list[Node]] = []
        self.namespace_uri: Optional[str] = None
        self.namespace_prefix: Optional[str] = None
        self.is_cdata = False
        """ Whether the value is rendered as CDATA section. """
        self.comment: Optional[str] = None
        """ A comment that is rendered as first content of the node. """
        self.pre_comment: Optional[str] = None
        """ A comment that is rendered before the node. """
        self.trim_override = Tristate.Inherit
        self.skip_empty_attributes_override = Tristate.Inherit
        self.skip_tag_if_empty_override = Tristate.Inherit
        self._is_root = False

        if tag_name is not None:
            self.set_tag_name(tag_name)
        if value is not None:
            self.set_value(value)

    def __repr__(self) -> str:
        return (
            f'<{self.__class__.__name__}("{self.tag_name}", {self.attributes}) '
            f"[{hex(id(self))}]>"
        )

    def _attach(self, node: Node):
        if self.value is not None:
            warnings.warn(
                IGNORED_VALUE_MESSAGE.format(self.tag_name),
                category=UserWarning,
                stacklevel=3,
            )

    @property
    def children(self) -> list[Node]:
        """The node's child nodes, an alias for :attr:`elements`."""
        return self._elements

    @property
    def is_root(self) -> bool:
        """Whether the node was added to a :class:`Document` directly."""
        return self._is_root

    # tag name and content

    def set_tag_name(self, tag_name: str) -> Self:
        self.tag_name = _validate_name(tag_name)
        return self

    def set_text(self, text: Optional[str]) -> Self:
        """Sets a string as the node's value."""
        if text is not None:
            if not isinstance(text, str):
                raise TypeError("A node's text must be a string.")
            if self._elements:
                warnings.warn(
                    IGNORED_VALUE_MESSAGE.format(self.tag_name),
                    category=UserWarning,
                    stacklevel=2,
                )
        self.value = text
        return self

    def set_value(self, value: Any) -> Self:
        """
        Offers the value to the registered value producers, see :meth:`Node.add`.

        :raises InvalidValueKind: If no producer accepts the value.
        """
        excuses: dict[ValueProducer, str] = {}
        for producer in plugin_manager.value_producers:
            if (excuse := producer(value, self)) is None:
                return self
            excuses[producer] = excuse
        raise InvalidValueKind(value, excuses)

    def cdata(self, flag: bool = True) -> Self:
        """Marks the node's value to be rendered as CDATA section."""
        self.is_cdata = flag
        return self

    # attributes

    def add_attribute(self, name: str, value: str) -> Self:
        if not isinstance(value, str):
            raise TypeError("An attribute value must be a string.")
        self.attributes[_validate_name(name, "attribute")] = value
        return self

    def remove_attribute(self, name: str) -> Self:
        self.attributes.pop(name, None)
        return self

    def set_attributes(self, attributes: Mapping[str, str]) -> Self:
        """Replaces all attributes with the given ones."""
        self.attributes.clear()
        for name, value in attributes.items():
            self.add_attribute(name, value)
        return self

    # namespace

    def has_namespace(self) -> bool:
        return bool(self.namespace_uri)

    def set_namespace(self, uri: Optional[str], prefix: Optional[str] = None) -> Self:
        """
        Assigns the node to a namespace. If the namespace isn't declared on the
        document level, it's declared with the node's tag using the given prefix. A
        prefix is generated when it's omitted.
        """
        self.namespace_uri = uri
        self.namespace_prefix = prefix
        return self

    # comments

    def set_comment(self, comment: Optional[str]) -> Self:
        self.comment = comment
        return self

    def set_pre_comment(self, comment: Optional[str]) -> Self:
        self.pre_comment = comment
        return self

    # policy overrides

    def skip_empty_attributes(self, flag: Optional[bool] = True) -> Self:
        """Overrides whether attributes with empty values are omitted."""
        self.skip_empty_attributes_override = Tristate.from_flag(flag)
        return self

    def skip_tag_if_empty(self, flag: Optional[bool] = True) -> Self:
        """Overrides whether the node is omitted when it has no content."""
        self.skip_tag_if_empty_override = Tristate.from_flag(flag)
        return self

    def trim(self, flag: Optional[bool] = True) -> Self:
        """Overrides whether the value and attribute values are stripped."""
        self.trim_override = Tristate.from_flag(flag)
        return self


__all__ = (Node.__name__,)
