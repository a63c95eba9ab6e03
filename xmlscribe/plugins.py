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
Plugins contribute through the hooks that are specified in
:mod:`_xmlscribe.plugins.specs`. A plugin module is made available to the plugin
manager as entrypoint in the ``xmlscribe`` group of its distribution's metadata or
by registering it explicitly with :meth:`plugin_manager.register`.
"""

from _xmlscribe.plugins import *  # noqa
from _xmlscribe.plugins import __all__  # noqa: F401
