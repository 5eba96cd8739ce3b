"""Content guard — pure tests for encoding, markup and control-character predicates.

Tests cover:
    - is_valid_encoding on str and bytes
    - contains_markup: tags, spaced tags, comments, CDATA, DOCTYPE, processing instructions
    - contains_control_chars: forbidden C0/DEL vs permitted TAB/LF
"""

import pytest

from recetario.core.guard_content import (
    contains_control_chars,
    contains_markup,
    is_valid_encoding,
)


# --- is_valid_encoding --------------------------------------------------------

def test_regular_unicode_text_is_valid():
    assert is_valid_encoding("crème brûlée, ñoquis")


def test_valid_utf8_bytes_are_valid():
    assert is_valid_encoding("café".encode("utf-8"))


def test_invalid_utf8_bytes_are_rejected():
    assert not is_valid_encoding(b"caf\xe9")
    assert not is_valid_encoding(b"\xff\xfe")


def test_lone_surrogate_in_str_is_rejected():
    assert not is_valid_encoding("caf\udce9")


# --- contains_markup ----------------------------------------------------------

@pytest.mark.parametrize("value", [
    "<b>azucar</b>",
    "<script>alert(1)</script>",
    "< script >",
    "</ div>",
    '<img src="x.png" onerror="alert(1)">',
    "<SCRIPT>",
    "harina <br/> azucar",
    "<custom-element>",
    "harina <!-- oculto -->",
    "<![CDATA[harina]]>",
    "<![cdata[harina]]>",
    "<!DOCTYPE html>",
    "<!doctype html>",
    "<?php echo 1; ?>",
    "<?xml version='1.0'?>",
])
def test_markup_is_detected(value):
    assert contains_markup(value)


@pytest.mark.parametrize("value", [
    "sal & pimienta",
    "3 < 5",
    "a > b",
    "1/2 taza de leche",
    "x<y",
    "harina",
])
def test_plain_text_is_not_markup(value):
    assert not contains_markup(value)


# --- contains_control_chars ---------------------------------------------------

@pytest.mark.parametrize("char", [
    "\x00", "\x01", "\x07", "\x08", "\x0b", "\x0c", "\x0e", "\x1b", "\x1f", "\x7f",
])
def test_forbidden_control_chars_are_detected(char):
    assert contains_control_chars(f"harina{char}azucar")


@pytest.mark.parametrize("value", [
    "harina\tazucar",
    "harina\nazucar",
    "harina\r\nazucar",
    "harina azucar",
])
def test_tab_and_line_breaks_are_permitted(value):
    assert not contains_control_chars(value)
