import html

import pytest

from recursia.color import Color
from recursia.color_console import (
    DEFAULT_FONT_SIZE,
    HTML_FOOTER,
    HTML_HEADER,
    ColorConsole,
    ConsoleFontStyle,
    ConsoleStyle,
)


def test_render_wraps_in_header_and_footer():
    console = ColorConsole()
    console.write("hello")
    rendered = console.render_html()
    assert rendered.startswith(HTML_HEADER)
    assert rendered.endswith(HTML_FOOTER)
    assert "hello" in rendered


def test_empty_console_renders_only_frame():
    assert ColorConsole().render_html() == HTML_HEADER + HTML_FOOTER


def test_default_style_span():
    console = ColorConsole()
    console.write("x")
    rendered = console.render_html()
    expected = (
        f'<span style="color:{Color.black().to_html()};'
        f'font-size:{DEFAULT_FONT_SIZE}pt;">x</span>'
    )
    assert expected in rendered


def test_text_is_escaped():
    console = ColorConsole()
    console.write("<b>&")
    rendered = console.render_html()
    assert html.escape("<b>&") in rendered
    assert "<b>&" not in rendered


def test_bold_italic_style():
    console = ColorConsole()
    console.set_style(Color.red_color(), ConsoleFontStyle.BOLD_ITALIC)
    console.write("loud")
    rendered = console.render_html()
    assert "font-weight:bold;" in rendered
    assert "font-style:italic;" in rendered
    assert Color.red_color().to_html() in rendered


def test_style_change_splits_runs():
    console = ColorConsole()
    console.write("a")
    console.set_style(Color.blue_color())
    console.write("b")
    console.render_html()
    assert console.contents == (
        (ConsoleStyle(), "a"),
        (ConsoleStyle(Color.blue_color()), "b"),
    )


def test_consecutive_writes_join_into_one_run():
    console = ColorConsole()
    console.write("ab")
    console.write("cd")
    console.render_html()
    assert [text for _, text in console.contents] == ["abcd"]


def test_flush_updates_display_and_calls_listener():
    seen = []
    console = ColorConsole(on_update=seen.append)
    console.write("hi")
    console.flush()
    assert seen == [console.display]
    assert "hi" in console.display


def test_print_to_console():
    console = ColorConsole()
    print("line", file=console)
    console.render_html()
    assert console.contents[0][1] == "line\n"


def test_clear_display_drops_text():
    console = ColorConsole()
    console.write("gone")
    console.render_html()
    console.write("pending")
    console.clear_display()
    assert console.contents == ()
    assert console.render_html() == HTML_HEADER + HTML_FOOTER


def test_with_style_restores_style():
    console = ColorConsole()
    console.set_style(Color.green_color(), ConsoleFontStyle.ITALIC, 20)
    before = console.style
    with console.with_style(font_style=ConsoleFontStyle.BOLD):
        assert console.style.font_style == ConsoleFontStyle.BOLD
        assert console.style.color == Color.green_color()
        assert console.style.font_size == 20
        console.write("inside")
    assert console.style == before
    console.render_html()
    assert console.contents[0][0].font_style == ConsoleFontStyle.BOLD


def test_with_style_restores_on_exception():
    console = ColorConsole()
    before = console.style
    with pytest.raises(RuntimeError):
        with console.with_style(color=Color.yellow(), font_size=30):
            raise RuntimeError("boom")
    assert console.style == before