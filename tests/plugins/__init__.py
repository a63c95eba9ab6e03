from __future__ import annotations

import sys
from numbers import Number
from typing import TYPE_CHECKING

from xmlscribe.plugins import hookimpl, plugin_manager

if TYPE_CHECKING:
    from xmlscribe import Node


def number_producer(value, node: Node):
    if isinstance(value, Number) and not isinstance(value, bool):
        node.set_text(str(value))
        return None
    return "The value is not a number."


@hookimpl
def configure_value_producers(producers):
    producers.insert(0, number_producer)


plugin_manager.register(sys.modules[__name__])
