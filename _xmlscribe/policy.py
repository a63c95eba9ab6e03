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
The functions in this module combine a node's local overrides with the global flags of
the document that is being rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing import Final

    from _xmlscribe.document import Document
    from _xmlscribe.nodes import Node


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def should_trim(node: Node, document: Document) -> bool:
    """Whether the node's value and attribute values are to be stripped."""
    return node.trim_override.resolve(document.trim_values)


def should_skip_empty_attribute(node: Node, document: Document, value: str) -> bool:
    """
    Whether an attribute of the node with the given value is to be omitted. Only
    empty values and such that consist of whitespace are considered.
    """
    if not _is_blank(value):
        return False
    return node.skip_empty_attributes_override.resolve(
        document.skip_empty_attributes
    )


class SkipDecisions:
    """
    Memoizes whether nodes are to be skipped entirely during one rendering pass. A
    node is skipped when it has neither a value nor any child that is rendered and
    its resolved *skip tag if empty* setting is on.
    """

    __slots__ = ("_decisions", "document")

    def __init__(self, document: Document):
        self._decisions: Final[dict[int, bool]] = {}
        self.document: Final = document

    def __call__(self, node: Node) -> bool:
        key = id(node)
        if (result := self._decisions.get(key)) is None:
            result = self._decisions[key] = self._decide(node)
        return result

    def _decide(self, node: Node) -> bool:
        # all child decisions are taken so they're available when the children are
        # visited by the renderer
        if node.children and not all([self(c) for c in node.children]):
            return False

        if not _is_blank(node.value):
            return False

        return node.skip_tag_if_empty_override.resolve(
            self.document.skip_empty_tags
        )


def should_skip_element(node: Node, document: Document) -> bool:
    """Whether the node is not to be rendered at all."""
    return SkipDecisions(document)(node)


__all__ = (
    should_skip_element.__name__,
    should_skip_empty_attribute.__name__,
    should_trim.__name__,
    SkipDecisions.__name__,
)
