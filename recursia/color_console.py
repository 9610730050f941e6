"""A text console whose output is rendered as styled HTML."""

from __future__ import annotations

import html
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import IntFlag

from recursia.color import Color

DEFAULT_FONT_SIZE = 11

HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class ConsoleFontStyle(IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class ConsoleStyle:
    """The color, font style and point size applied to a run of text."""

    color: Color = field(default_factory=Color.black)
    font_style: ConsoleFontStyle = ConsoleFontStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE

    def css(self):
        parts = [f"color:{self.color.to_html()};"]
        if self.font_style & ConsoleFontStyle.BOLD:
            parts.append("font-weight:bold;")
        if self.font_style & ConsoleFontStyle.ITALIC:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.font_size}pt;")
        return "".join(parts)


class ColorConsole:
    """A writable stream that keeps text in styled runs and renders it as HTML.

    Text is buffered until the style changes or the console is flushed.
    Flushing renders the HTML into ``display`` and passes it to ``on_update``
    if one was given.
    """

    def __init__(self, on_update=None):
        self.style = ConsoleStyle()
        self.display = ""
        self._on_update = on_update
        self._buffer = []
        self._contents = []

    @property
    def contents(self):
        """The styled runs of text committed so far."""
        return tuple(self._contents)

    def write(self, text):
        self._buffer.append(text)
        return len(text)

    def _flush_buffer(self):
        text = "".join(self._buffer)
        self._buffer.clear()
        if text:
            self._contents.append((self.style, text))

    def render_html(self):
        """Commits buffered text and returns the whole console as HTML."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text)}</span>'
            for style, text in self._contents
        )
        return HTML_HEADER + spans + HTML_FOOTER

    def flush(self):
        self.display = self.render_html()
        if self._on_update is not None:
            self._on_update(self.display)

    def clear_display(self):
        """Drops all text; the display is not updated until the next flush."""
        self._buffer.clear()
        self._contents.clear()

    def set_style(
        self,
        color=None,
        font_style=ConsoleFontStyle.NORMAL,
        font_size=DEFAULT_FONT_SIZE,
    ):
        """Sets the style for text written from now on; color defaults to black."""
        self._flush_buffer()
        self.style = ConsoleStyle(
            color if color is not None else Color.black(),
            ConsoleFontStyle(font_style),
            font_size,
        )

    @contextmanager
    def with_style(self, color=None, font_style=None, font_size=None):
        """Temporarily changes the given parts of the style, restoring them afterwards."""
        old = self.style
        self.set_style(
            color if color is not None else old.color,
            font_style if font_style is not None else old.font_style,
            font_size if font_size is not None else old.font_size,
        )
        try:
            yield self
        finally:
            self.set_style(old.color, old.font_style, old.font_size)