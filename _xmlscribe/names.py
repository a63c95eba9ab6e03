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

from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from typing import Final

    from _xmlscribe.nodes import Node
    from _xmlscribe.typing import NamespaceDeclarations


GENERATED_PREFIX: Final = "ns"


class ResolvedNamespace(NamedTuple):
    prefix: Optional[str]
    """ The prefix that qualifies the tag name, :obj:`None` for no prefix. """
    namespace: Optional[str]
    """ A namespace URI that needs to be declared on the tag, if any. """


def namespace_declaration_name(prefix: Optional[str]) -> str:
    """
    Returns the attribute name that declares a namespace for the given prefix.

    >>> namespace_declaration_name("")
    'xmlns'
    >>> namespace_declaration_name("tei")
    'xmlns:tei'
    """
    return f"xmlns:{prefix}" if prefix else "xmlns"


class NamespaceResolver:
    """
    Decides which prefix a node's tag name is qualified with and whether its namespace
    must be declared on the node's tag.

    - Namespaces that are declared as root namespaces of a document are referenced by
      their prefix only, the declarations are rendered on the top-level nodes.
    - Other namespaces are declared with the tag of each node that belongs to them.
      The first node that introduces such a namespace determines its prefix, nodes
      that share the namespace later on use that one, regardless of the prefix that
      they may specify themselves.
    - Such namespaces that come without a prefix get one assigned by enumeration,
      starting with ``ns1``. That also applies when the requested prefix is already
      bound to another namespace.

    Instances are supposed to be used for exactly one rendering pass.

    :param root_namespaces: A mapping of the pre-declared namespaces to prefixes.
    """

    __slots__ = ("_all_namespaces", "_generated_counter", "root_namespaces")

    def __init__(self, root_namespaces: Optional[NamespaceDeclarations] = None):
        self.root_namespaces: Final = MappingProxyType(dict(root_namespaces or {}))
        self._all_namespaces: Final[dict[str, str]] = dict(self.root_namespaces)
        self._generated_counter = 0

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__qualname__}({self._all_namespaces}) "
            f"[{hex(id(self))}]>"
        )

    @property
    def declared_namespaces(self) -> MappingProxyType[str, str]:
        """All namespaces that are known to the resolver at its current state."""
        return MappingProxyType(self._all_namespaces)

    def _generate_prefix(self) -> str:
        taken = set(self._all_namespaces.values())
        while True:
            self._generated_counter += 1
            prefix = f"{GENERATED_PREFIX}{self._generated_counter}"
            if prefix not in taken:
                return prefix

    def resolve(self, node: Node) -> ResolvedNamespace:
        """
        Determines the prefix and the namespace to declare for a node.

        :param node: The node whose namespace shall be resolved.
        :return: A tuple of the prefix and the namespace to declare, both may be
                 :obj:`None`.
        """
        namespace = node.namespace_uri
        if not namespace:
            return ResolvedNamespace(None, None)

        if (prefix := self._all_namespaces.get(namespace)) is None:
            prefix = node.namespace_prefix
            if not prefix or prefix in self._all_namespaces.values():
                # a prefix must not be bound to two namespaces
                prefix = self._generate_prefix()
            self._all_namespaces[namespace] = prefix
            return ResolvedNamespace(prefix, namespace)

        return ResolvedNamespace(
            prefix or None,
            None if namespace in self.root_namespaces else namespace,
        )


__all__ = (
    "GENERATED_PREFIX",
    namespace_declaration_name.__name__,
    NamespaceResolver.__name__,
    ResolvedNamespace.__name__,
)
