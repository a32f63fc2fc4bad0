"""Tests for backend filter expressions."""

from filterpresets.filter_expression import FilterExpression


def test_raw_string_is_kept_verbatim():
    f = FilterExpression.from_raw_string("eq=brightness=0.2")
    assert f.name == "eq"
    assert str(f) == "eq=brightness=0.2"


def test_lavfi_wraps_params_in_brackets():
    f = FilterExpression.lavfi("lutrgb", None, {"r": "negval", "g": "negval"})
    assert f.name == "lavfi"
    assert str(f) == "lavfi=[lutrgb=r=negval:g=negval]"


def test_lavfi_without_params():
    assert str(FilterExpression.lavfi("hflip", None, {})) == "lavfi=[hflip]"


def test_label_prefix():
    f = FilterExpression.lavfi("hflip", "mirror", {})
    assert str(f) == "@mirror:lavfi=[hflip]"


def test_positional_params_drop_trailing_empty_values():
    f = FilterExpression(name="crop", params={"w": "640", "h": "480", "x": "", "y": ""},
                         param_order=["w", "h", "x", "y"])
    assert str(f) == "crop=640:480"


def test_positional_params_keep_inner_empty_values():
    f = FilterExpression(name="crop", params={"w": "", "h": "480", "x": "10", "y": ""},
                         param_order=["w", "h", "x", "y"])
    assert str(f) == "crop=:480:10"


def test_named_params_skip_empty_values():
    f = FilterExpression(name="scale", params={"w": "1280", "h": ""})
    assert str(f) == "scale=w=1280"


def test_unsharp():
    f = FilterExpression.unsharp(amount=0.5, msize=7)
    assert str(f) == "lavfi=[unsharp=lx=7:ly=7:la=0.5:cx=7:cy=7:ca=0.5]"
