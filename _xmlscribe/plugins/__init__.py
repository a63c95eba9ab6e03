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

from _xmlscribe.plugins import specs


if TYPE_CHECKING:
    from _xmlscribe.typing import ValueProducer


PROJECT_NAME = "xmlscribe"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PluginManager(pluggy.PluginManager):
    """
    Collects the contributions of plugins. Plugin modules are registered with
    :meth:`register` or as entrypoint in the ``xmlscribe`` group.
    """

    def __init__(self):
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(specs)

    def load_plugins(self):
        """
        Loads the core plugins and all modules that are registered as entrypoint in the
        ``xmlscribe`` group.
        """
        from _xmlscribe.plugins import core_producers

        if not self.is_registered(core_producers):
            self.register(core_producers)
        self.load_setuptools_entrypoints(PROJECT_NAME)

    @property
    def value_producers(self) -> tuple[ValueProducer, ...]:
        """The value producers in the order they're consulted."""
        producers: list[ValueProducer] = []
        self.hook.configure_value_producers(producers=producers)
        return tuple(producers)


plugin_manager = PluginManager()


__all__ = ("hookimpl", "plugin_manager", PluginManager.__name__)
