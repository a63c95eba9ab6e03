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

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, TypeAlias

if TYPE_CHECKING:
    from _xmlscribe.nodes import Node


if sys.version_info < (3, 11):  # DROPWITH Python 3.10
    from typing_extensions import Self
else:
    from typing import Self


class Tristate(Enum):
    """
    A node's local override of a document-wide policy flag. :attr:`Inherit` defers to
    the document's setting, the other two members win over it.
    """

    Inherit = "inherit"
    ForceOn = "on"
    ForceOff = "off"

    @classmethod
    def from_flag(cls, flag: Optional[bool]) -> Tristate:
        """
        >>> Tristate.from_flag(None)
        <Tristate.Inherit: 'inherit'>
        >>> Tristate.from_flag(False)
        <Tristate.ForceOff: 'off'>
        """
        if flag is None:
            return cls.Inherit
        return cls.ForceOn if flag else cls.ForceOff

    def resolve(self, default: bool) -> bool:
        """Returns the override if one is set, otherwise the given default."""
        match self:
            case Tristate.ForceOn:
                return True
            case Tristate.ForceOff:
                return False
        return default


class XMLSerializable(ABC):
    """
    Objects of classes that implement this interface can be passed as value to
    :meth:`Node.add` and :meth:`Node.set_value`. They are supposed to populate the
    node that they're the value of, e.g. with attributes and child nodes:

    >>> class Author(XMLSerializable):
    ...     def __init__(self, name):
    ...         self.name = name
    ...     def xml_serialize(self, parent):
    ...         parent.add_attribute("role", "author").add("name", self.name)

    Despite its name no markup is produced at this point, that happens when the
    document is rendered.
    """

    @abstractmethod
    def xml_serialize(self, parent: Node) -> None:
        pass


NamespaceDeclarations: TypeAlias = Mapping[str, str]
""" A mapping of namespace URIs to prefixes, an empty prefix denotes the default. """
ValueProducer: TypeAlias = Callable[[Any, "Node"], Optional[str]]


__all__ = (
    "NamespaceDeclarations",
    "Self",
    Tristate.__name__,
    "ValueProducer",
    XMLSerializable.__name__,
)
