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

from abc import ABC, abstractmethod
from io import StringIO
from typing import TYPE_CHECKING, Literal, Optional, TextIO

from _xmlscribe.exceptions import InvalidOperation
from _xmlscribe.names import namespace_declaration_name

if TYPE_CHECKING:
    from typing import Final


# constants


CTRL_CHAR_ENTITY_NAME_MAPPING: Final = (
    ("&", "amp"),
    (">", "gt"),
    ("<", "lt"),
    ('"', "quot"),
)
CCE_TABLE_FOR_ATTRIBUTES: Final = str.maketrans(
    {ord(k): f"&{v};" for k, v in CTRL_CHAR_ENTITY_NAME_MAPPING}
)
CCE_TABLE_FOR_TEXT: Final = str.maketrans(
    {ord(k): f"&{v};" for k, v in CTRL_CHAR_ENTITY_NAME_MAPPING if k != '"'}
)

CDATA_END: Final = "]]>"


# interface


class MarkupSink(ABC):
    """
    Defines the events that a renderer emits while it walks a tree. Implementations
    take care of escaping, indentation and buffering.
    """

    @abstractmethod
    def open(self):
        """Prepares the sink for a new output."""

    @abstractmethod
    def start_document(
        self, version: str, encoding: Optional[str], standalone: Optional[str]
    ):
        """Writes the XML declaration."""

    @abstractmethod
    def set_indent(self, enabled: bool, indent_string: str):
        pass

    @abstractmethod
    def open_element(
        self, prefix: Optional[str], tag_name: str, namespace_uri: Optional[str]
    ):
        """
        Starts an element. A given namespace URI is declared for the prefix on that
        element.
        """

    @abstractmethod
    def start_attribute(self, name: str):
        pass

    @abstractmethod
    def write_text(self, value: str):
        """
        Writes to the value of the currently started attribute or, if there's none,
        escaped text content.
        """

    @abstractmethod
    def end_attribute(self):
        pass

    @abstractmethod
    def write_escaped_text(self, value: str):
        pass

    @abstractmethod
    def write_raw_cdata(self, value: str):
        pass

    @abstractmethod
    def write_comment(self, value: str):
        pass

    @abstractmethod
    def close_element(self):
        pass

    @abstractmethod
    def end_document(self):
        """Closes all elements that are still open."""

    @abstractmethod
    def output_as_string(self) -> str:
        pass


# implementation


class _ElementFrame:
    __slots__ = ("content", "leading_comments", "name")

    def __init__(self, name: str):
        self.name: Final = name
        self.content: Literal[None, "text", "structure"] = None
        self.leading_comments: list[str] = []


class XMLWriter(MarkupSink):
    """
    A markup sink that writes XML encoded text to a text buffer.

    :param buffer: A :term:`file-like object` that accepts strings. If omitted, an
                   :class:`io.StringIO` instance is used of which the contents can be
                   obtained with :meth:`output_as_string`.
    :param newline: See :class:`io.StringIO` for a detailed explanation of the
                    parameter with the same name. Only used with the default buffer.
    """

    __slots__ = (
        "_attribute",
        "buffer",
        "_frames",
        "_indent",
        "_indent_string",
        "_newline",
        "_owns_buffer",
        "_start_tag_pending",
        "_written",
    )

    def __init__(self, buffer: Optional[TextIO] = None, newline: Optional[str] = None):
        self._newline: Final = newline
        self._owns_buffer: Final = buffer is None
        self.buffer: TextIO = StringIO(newline=newline) if buffer is None else buffer
        self._attribute: Optional[str] = None
        self._frames: Final[list[_ElementFrame]] = []
        self._indent = False
        self._indent_string = ""
        self._start_tag_pending = False
        self._written = ""

    def __call__(self, data: str):
        if data:
            self.buffer.write(data)
            self._written = data[-1]

    @property
    def depth(self) -> int:
        """The number of currently open elements."""
        return len(self._frames)

    def _assert_no_attribute(self):
        if self._attribute is not None:
            raise InvalidOperation(
                f"The attribute `{self._attribute}` must be ended first."
            )

    def _close_start_tag(self):
        if self._start_tag_pending:
            self(">")
            self._start_tag_pending = False

    def _flush_leading_comments(self, frame: _ElementFrame, inline: bool):
        comments = frame.leading_comments
        if not comments:
            return
        frame.content = "text" if inline else "structure"
        for comment in comments:
            if not inline:
                self._write_indentation(self.depth)
            self(f"<!--{comment}-->")
        comments.clear()

    def _prepare_content(self, kind: Literal["text", "structure"]):
        self._assert_no_attribute()
        self._close_start_tag()
        if not self._frames:
            return
        frame = self._frames[-1]
        self._flush_leading_comments(frame, inline=kind == "text" or not self._indent)
        if frame.content is None:
            frame.content = kind
        elif frame.content != kind:
            # mixed content isn't indented
            frame.content = "text"

    def _structure_is_indented(self) -> bool:
        return self._indent and (not self._frames or self._frames[-1].content != "text")

    def _write_indentation(self, level: int):
        if self._written and self._written != "\n":
            self("\n")
        self(level * self._indent_string)

    # sink interface

    def open(self):
        if self._owns_buffer:
            self.buffer = StringIO(newline=self._newline)
        self._attribute = None
        self._frames.clear()
        self._start_tag_pending = False
        self._written = ""

    def start_document(
        self,
        version: str = "1.0",
        encoding: Optional[str] = None,
        standalone: Optional[str] = None,
    ):
        if self._written or self._frames:
            raise InvalidOperation("The XML declaration must be the first output.")
        declaration = f'<?xml version="{version}"'
        if encoding:
            declaration += f' encoding="{encoding}"'
        if standalone is not None:
            declaration += f' standalone="{standalone}"'
        self(declaration + "?>\n")

    def set_indent(self, enabled: bool, indent_string: str = "    "):
        self._indent = enabled
        self._indent_string = indent_string if enabled else ""

    def open_element(
        self,
        prefix: Optional[str],
        tag_name: str,
        namespace_uri: Optional[str] = None,
    ):
        indented = self._structure_is_indented()
        self._prepare_content("structure")
        if indented:
            self._write_indentation(self.depth)

        name = f"{prefix}:{tag_name}" if prefix else tag_name
        self(f"<{name}")
        self._frames.append(_ElementFrame(name))
        self._start_tag_pending = True

        if namespace_uri is not None:
            self.start_attribute(namespace_declaration_name(prefix))
            self.write_text(namespace_uri)
            self.end_attribute()

    def start_attribute(self, name: str):
        self._assert_no_attribute()
        if not self._start_tag_pending:
            raise InvalidOperation("Attributes can only be added to a start tag.")
        self._attribute = name
        self(f' {name}="')

    def write_text(self, value: str):
        if self._attribute is None:
            self.write_escaped_text(value)
        else:
            self(value.translate(CCE_TABLE_FOR_ATTRIBUTES))

    def end_attribute(self):
        if self._attribute is None:
            raise InvalidOperation("No attribute has been started.")
        self('"')
        self._attribute = None

    def write_escaped_text(self, value: str):
        self._prepare_content("text")
        self(value.translate(CCE_TABLE_FOR_TEXT))

    def write_raw_cdata(self, value: str):
        self._prepare_content("text")
        # a section can't contain its own terminator, it's split into two sections
        self(f"<![CDATA[{value.replace(CDATA_END, ']]]]><![CDATA[>')}{CDATA_END}")

    def write_comment(self, value: str):
        self._assert_no_attribute()
        if self._frames and self._frames[-1].content is None:
            # it's undetermined yet whether text or elements follow
            self._close_start_tag()
            self._frames[-1].leading_comments.append(value)
            return

        indented = self._structure_is_indented()
        self._prepare_content("structure")
        if indented:
            self._write_indentation(self.depth)
        self(f"<!--{value}-->")

    def close_element(self):
        self._assert_no_attribute()
        if not self._frames:
            raise InvalidOperation("There's no open element to close.")

        frame = self._frames[-1]
        self._flush_leading_comments(frame, inline=not self._indent)
        self._frames.pop()

        if self._start_tag_pending:
            self("/>")
            self._start_tag_pending = False
            return

        if frame.content == "structure" and self._indent:
            self._write_indentation(self.depth)
        self(f"</{frame.name}>")

    def end_document(self):
        while self._frames:
            self.close_element()
        if self._written and self._written != "\n":
            self("\n")
        self.buffer.flush()

    def output_as_string(self) -> str:
        if isinstance(self.buffer, StringIO):
            return self.buffer.getvalue()
        raise TypeError(  # pragma: no cover
            "Underlying buffer must be an instance of `io.StringIO`"
        )


__all__ = (
    MarkupSink.__name__,
    XMLWriter.__name__,
)
