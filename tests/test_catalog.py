"""Tests for the built-in preset catalog."""

import pytest

from filterpresets.catalog import PresetCatalog, builtin_presets, get_catalog
from filterpresets.filter_expression import FilterExpression
from filterpresets.parameters import FilterParameterValue
from filterpresets.presets import FilterPreset


@pytest.fixture
def catalog():
    return PresetCatalog()


def test_builtin_preset_order(catalog):
    assert catalog.preset_names() == [
        "crop", "expand", "sharpen", "blur", "delogo",
        "negative", "vflip", "hflip", "custom_mpv", "custom_ffmpeg",
    ]


def test_get_preset(catalog):
    assert catalog.get_preset("crop").name == "crop"
    assert catalog.get_preset("nonexistent") is None


def test_get_catalog_is_shared():
    assert get_catalog() is get_catalog()


def test_duplicate_names_keep_last():
    first = FilterPreset("dup", params={})
    second = FilterPreset("dup", params={})
    catalog = PresetCatalog([first, second])
    assert catalog.get_all_presets() == [second]


def test_search_presets(catalog):
    names = [p.name for p in catalog.search_presets("custom")]
    assert names == ["custom_mpv", "custom_ffmpeg"]


def test_every_param_order_token_is_declared():
    for preset in builtin_presets():
        for token in preset.param_order or []:
            assert token in preset.params


def test_sharpen_defaults(catalog, monkeypatch):
    calls = []

    def fake_unsharp(cls, amount, msize=5):
        calls.append((amount, msize))
        return FilterExpression(name="unsharp")

    monkeypatch.setattr(FilterExpression, "unsharp", classmethod(fake_unsharp))

    instance = catalog.get_preset("sharpen").create_instance()
    assert instance.value("amount") == FilterParameterValue.float(0.0)
    assert instance.value("msize") == FilterParameterValue.int(5)

    instance.apply()
    assert calls == [(0.0, 5)]


def test_sharpen_filter_string(catalog):
    instance = catalog.get_preset("sharpen").create_instance(amount=1.0, msize=7)
    assert str(instance.apply()) == "lavfi=[unsharp=lx=7:ly=7:la=1.0:cx=7:cy=7:ca=1.0]"


@pytest.mark.parametrize("amount", [0.0, 0.25, 0.5, 1.0, 1.5])
def test_blur_is_sharpen_with_inverted_amount(catalog, amount):
    blur = catalog.get_preset("blur").create_instance(amount=amount)
    sharpen = catalog.get_preset("sharpen").create_instance(amount=-amount)
    assert blur.apply() == sharpen.apply()


def test_crop(catalog):
    preset = catalog.get_preset("crop")
    instance = preset.create_instance(w="640", h="480")
    assert instance.value("x") == FilterParameterValue.text("")
    assert preset.param_order == ["w", "h", "x", "y"]
    assert str(instance.apply()) == "crop=640:480"


def test_crop_with_position(catalog):
    instance = catalog.get_preset("crop").create_instance(w="640", h="480", x="10", y="20")
    assert str(instance.apply()) == "crop=640:480:10:20"


def test_expand_defaults(catalog):
    instance = catalog.get_preset("expand").create_instance()
    assert str(instance.apply()) == "expand=::::0:1"


def test_delogo_uses_default_lavfi_transformer(catalog):
    instance = catalog.get_preset("delogo").create_instance(x="100")
    assert str(instance.apply()) == "lavfi=[delogo=x=100:y=1:w=1:h=1]"


def test_negative(catalog):
    instance = catalog.get_preset("negative").create_instance()
    assert str(instance.apply()) == "lavfi=[lutrgb=r=negval:g=negval:b=negval]"


@pytest.mark.parametrize("name", ["vflip", "hflip"])
def test_flips(catalog, name):
    assert str(catalog.get_preset(name).create_instance().apply()) == name


def test_custom_mpv(catalog):
    instance = catalog.get_preset("custom_mpv").create_instance(name="eq", string="brightness=0.2")
    assert str(instance.apply()) == "eq=brightness=0.2"


def test_custom_ffmpeg(catalog):
    instance = catalog.get_preset("custom_ffmpeg").create_instance(name="eq", string="brightness=0.2")
    assert str(instance.apply()) == "lavfi=[eq=brightness=0.2]"


def test_custom_filters_are_not_validated(catalog):
    instance = catalog.get_preset("custom_mpv").create_instance(name="", string="::garbage")
    assert str(instance.apply()) == "=::garbage"


def test_blur_default_amount_renders_without_negative_zero(catalog):
    instance = catalog.get_preset("blur").create_instance()
    assert str(instance.apply()) == "lavfi=[unsharp=lx=5:ly=5:la=0.0:cx=5:cy=5:ca=0.0]"
