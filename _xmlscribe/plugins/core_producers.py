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

"""
The ``core_producers`` module provides the value producers that make node contents
from strings, :class:`XMLSerializable` objects and callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from _xmlscribe.plugins import hookimpl
from _xmlscribe.typing import XMLSerializable

if TYPE_CHECKING:
    from _xmlscribe.nodes import Node
    from _xmlscribe.typing import ValueProducer


def text_producer(value: Any, node: Node) -> Optional[str]:
    """Uses strings as the node's text, :obj:`None` clears it."""
    if value is None or isinstance(value, str):
        node.set_text(value)
        return None
    return "The value is not a string."


def serializable_producer(value: Any, node: Node) -> Optional[str]:
    """Lets an :class:`XMLSerializable` object populate the node."""
    if isinstance(value, XMLSerializable):
        value.xml_serialize(node)
        return None
    return "The value doesn't implement the XMLSerializable interface."


def callable_producer(value: Any, node: Node) -> Optional[str]:
    """
    Calls the value with the node as only argument, e.g. to add attributes and child
    nodes:

    >>> from _xmlscribe.nodes import Node
    >>> book = Node("book", lambda n: n.add("chapter", "The boy who lived"))
    >>> book.children[0].value
    'The boy who lived'
    """
    if callable(value):
        value(node)
        return None
    return "The value isn't callable."


@hookimpl(tryfirst=True)
def configure_value_producers(producers: list[ValueProducer]):
    producers.extend((text_producer, serializable_producer, callable_producer))


__all__ = (
    callable_producer.__name__,
    serializable_producer.__name__,
    text_producer.__name__,
)
