"""Text normalization — pure tests for the whitespace/line-break rewriter.

Tests cover:
    - Line-break unification (CRLF, lone CR)
    - Intra-line whitespace collapsing that keeps LF
    - Blank-line run collapsing and per-line trimming
    - Idempotence
"""

import pytest

from recetario.core.normalize_text import normalize_text


# --- Line breaks --------------------------------------------------------------

def test_crlf_and_lone_cr_become_lf():
    assert normalize_text("harina\r\nazucar\rsal") == "harina\nazucar\nsal"


def test_single_line_break_is_preserved():
    assert normalize_text("harina\nazucar") == "harina\nazucar"


# --- Whitespace ---------------------------------------------------------------

def test_whole_value_is_trimmed():
    assert normalize_text("   harina   ") == "harina"


def test_intra_line_whitespace_collapses_to_one_space():
    assert normalize_text("2   tazas\t\tde  harina") == "2 tazas de harina"


def test_non_breaking_space_collapses_like_any_whitespace():
    assert normalize_text("sal\u00a0\u00a0gruesa") == "sal gruesa"


def test_each_line_is_trimmed():
    assert normalize_text("  harina  \n   azucar   ") == "harina\nazucar"


# --- Blank lines --------------------------------------------------------------

@pytest.mark.parametrize("raw", [
    "harina\n\nazucar",
    "harina\n\n\n\nazucar",
    "harina\n \t \nazucar",
    "harina\r\n\r\n\r\nazucar",
    "harina\n  \n\n   \nazucar",
])
def test_blank_line_runs_collapse_to_one_line_break(raw):
    assert normalize_text(raw) == "harina\nazucar"


# --- Totality -----------------------------------------------------------------

@pytest.mark.parametrize("raw", ["", "   ", "\n\n", "\r\n\t \r"])
def test_whitespace_only_input_normalizes_to_empty(raw):
    assert normalize_text(raw) == ""


@pytest.mark.parametrize("raw", [
    "  a  b \r\n\r\n c\td  ",
    "harina\n\n \nazucar\r\nsal   fina",
    "uno",
])
def test_normalization_is_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once
