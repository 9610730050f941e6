import dataclasses
import sys

import pytest

from recursia.color import Color
from recursia.font import Font, FontFamily, FontStyle, family_name, style_name


def test_defaults():
    font = Font()
    assert font.family is FontFamily.SANS_SERIF
    assert font.style is FontStyle.NORMAL
    assert font.size == 13
    assert font.color == Color.black()


def test_with_methods_change_one_field():
    font = Font(FontFamily.SERIF, FontStyle.ITALIC, 24, Color.blue_color())
    assert font.with_size(10) == Font(FontFamily.SERIF, FontStyle.ITALIC, 10, Color.blue_color())
    assert font.with_family(FontFamily.MONOSPACE).family is FontFamily.MONOSPACE
    assert font.with_style(FontStyle.BOLD).style is FontStyle.BOLD
    assert font.with_color(Color.white()).color == Color.white()
    assert font.with_color(Color.white()).size == font.size


def test_with_methods_leave_original_unchanged():
    font = Font()
    font.with_size(40)
    assert font.size == 13


def test_font_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Font().size = 4


def test_style_names():
    assert style_name(FontStyle.BOLD) == "BOLD"
    assert style_name(FontStyle.BOLD_ITALIC) == "BOLDITALIC"
    assert style_name(FontStyle.ITALIC) == "ITALIC"
    assert style_name(FontStyle.NORMAL) == "<normal>"


def test_unknown_style_and_family_raise():
    with pytest.raises(ValueError):
        style_name("bold")
    with pytest.raises(ValueError):
        family_name("serif")


def test_family_names_on_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert family_name(FontFamily.SERIF) == "Serif"
    assert family_name(FontFamily.SANS_SERIF) == "Sans Serif"
    assert family_name(FontFamily.UNICODE_MONOSPACE) == "Monospace"


def test_family_names_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    assert family_name(FontFamily.SERIF) == "Didot"
    assert family_name(FontFamily.MONOSPACE) == "Monaco"


def test_family_names_on_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert family_name(FontFamily.UNICODE_SERIF) == "Times New Roman"
    assert family_name(FontFamily.UNICODE_SANS_SERIF) == "Lucida Sans Unicode"


def test_font_string_with_style(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    font = Font(FontFamily.SERIF, FontStyle.ITALIC, 24, Color.white())
    assert font.library_font_string() == "Serif-ITALIC-24"


def test_font_string_normal_style_omits_style(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert Font().library_font_string() == "Sans Serif-13"


def test_font_string_bold_italic_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    font = Font(FontFamily.SERIF, FontStyle.BOLD_ITALIC, 36, Color(0x80, 0x00, 0x80))
    assert font.library_font_string() == "Didot-BOLDITALIC-36"