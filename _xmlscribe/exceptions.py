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

"""These are the specific xmlscribe exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from _xmlscribe.typing import ValueProducer


class XMLScribeBaseException(Exception):
    pass


class InvalidOperation(XMLScribeBaseException):
    """Raised when an invalid operation is attempted by the client code."""

    pass


class InvalidValueKind(XMLScribeBaseException, TypeError):
    """
    Raised when a value for a node's content is neither text nor anything that one of
    the registered value producers can make sense of.
    """

    def __init__(self, value: Any, excuses: dict[ValueProducer, str]):
        self.value = value
        self.excuses = excuses

    def __str__(self):
        excuses = ", ".join(
            f"{getattr(p, '__name__', p)}: {e}" for p, e in self.excuses.items()
        )
        return (
            f"Can't use a value of type {type(self.value).__name__} as node content. "
            f"These producers refused it: {excuses or '(none registered)'}"
        )


class MalformedNamespaceRequest(XMLScribeBaseException, ValueError):
    """
    Reserved for namespace prefixes that contain characters which are illegal in
    markup names. Prefixes are currently used as they are given.
    """

    pass


__all__ = (
    InvalidOperation.__name__,
    InvalidValueKind.__name__,
    MalformedNamespaceRequest.__name__,
    XMLScribeBaseException.__name__,
)
