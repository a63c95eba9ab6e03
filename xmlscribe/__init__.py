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
xmlscribe builds trees of markup nodes with a fluent interface and renders them as
XML text:

>>> from xmlscribe import Document
>>> document = (
...     Document()
...     .skip_prolog()
...     .set_namespace("https://example.com")
...     .add("book", lambda book: book.add("title", "Zazie").add("isbn", ""))
... )
>>> print(document, end="")
<book xmlns="https://example.com">
    <title>Zazie</title>
    <isbn></isbn>
</book>
"""

from _xmlscribe.document import Document
from _xmlscribe.exceptions import (
    InvalidOperation,
    InvalidValueKind,
    MalformedNamespaceRequest,
    XMLScribeBaseException,
)
from _xmlscribe.names import NamespaceResolver, ResolvedNamespace
from _xmlscribe.nodes import Node
from _xmlscribe.policy import (
    should_skip_element,
    should_skip_empty_attribute,
    should_trim,
    SkipDecisions,
)
from _xmlscribe.serializer import DefaultRenderOptions, Renderer, sanitize_comment
from _xmlscribe.typing import Tristate, XMLSerializable
from _xmlscribe.writer import MarkupSink, XMLWriter


__all__ = (
    DefaultRenderOptions.__name__,
    Document.__name__,
    InvalidOperation.__name__,
    InvalidValueKind.__name__,
    MalformedNamespaceRequest.__name__,
    MarkupSink.__name__,
    NamespaceResolver.__name__,
    Node.__name__,
    Renderer.__name__,
    ResolvedNamespace.__name__,
    sanitize_comment.__name__,
    should_skip_element.__name__,
    should_skip_empty_attribute.__name__,
    should_trim.__name__,
    SkipDecisions.__name__,
    Tristate.__name__,
    XMLScribeBaseException.__name__,
    XMLSerializable.__name__,
    XMLWriter.__name__,
)
