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

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from _xmlscribe.typing import ValueProducer


hookspec = pluggy.HookspecMarker("xmlscribe")


@hookspec
def configure_value_producers(producers: list[ValueProducer]) -> None:
    """
    Configures the producers that make node contents from the values that are passed
    to :meth:`Node.add` and :meth:`Node.set_value`. Implementations are expected to
    manipulate the list that is provided to the hook.

    A producer is called with the value and the node it is applied to. It returns
    :obj:`None` when it has processed the value. Otherwise it returns a string that
    explains why it didn't, the value is then offered to the next producer.

    An example module that is specified as ``xmlscribe`` plugin to render dates might
    look like this:

    .. testcode::

        from datetime import date

        from xmlscribe.plugins import hookimpl


        def date_producer(value, node):
            if isinstance(value, date):
                node.set_text(value.isoformat())
                return None
            return "The value is not a date."


        @hookimpl
        def configure_value_producers(producers):
            producers.insert(0, date_producer)

    The core producers are added before any plugin's hook implementation is called.
    """


__all__ = (configure_value_producers.__name__, "hookspec")
