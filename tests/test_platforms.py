import pytest

from emojidir.platforms import (
    NOTO_SIZES,
    available_styles,
    default_style,
    download_options,
    noto_filename,
    platform_from_slug,
    platform_slug,
    resolve_style_path,
    select_platform_view,
)

BASE_URL = "https://cdn.example.com"


def test_default_variant_is_used_when_style_missing():
    assert resolve_style_path({"color-default": "path/a.png"}, "color") == "path/a.png"


@pytest.mark.parametrize("styles", [{}, None, {"color": ""}])
def test_no_styles_resolves_to_glyph(styles):
    assert resolve_style_path(styles, "color") is None


def test_exact_style_beats_default_variant():
    styles = {"3d-default": "b.png", "3d": "a.png"}
    assert resolve_style_path(styles, "3d") == "a.png"


def test_falls_back_to_first_available_style():
    styles = {"flat": "f.svg", "color": "c.svg"}
    assert resolve_style_path(styles, "3d") == "f.svg"
    assert resolve_style_path(styles, "3d") == resolve_style_path(dict(styles), "3d")


def test_available_styles_prefers_canonical_order(catalog):
    grinning = catalog["emojis"][0]
    assert available_styles(grinning) == ["3d", "color", "high-contrast"]
    assert default_style(grinning) == "3d"


def test_available_styles_skips_theme_and_tone_variants():
    emoji = {"styles": {"medium-dark": "a.png", "animated": "b.gif", "default": "c.png"}}
    assert available_styles(emoji) == ["animated"]


def test_default_style_without_any_style(catalog):
    family = catalog["emojis"][2]
    assert available_styles(family) == []
    assert default_style(family) == "3d"


@pytest.mark.parametrize(
    "slug, platform",
    [("fluent-emoji", "fluent"), ("nato-emoji", "nato"), ("unicode", "unicode"), ("bogus-emoji", "fluent"), (None, "fluent")],
)
def test_platform_from_slug(slug, platform):
    assert platform_from_slug(slug) == platform


def test_platform_slug():
    assert platform_slug("nato") == "nato-emoji"
    assert platform_slug("windows") == "fluent-emoji"


def test_platform_view_shares_records(catalog):
    view = select_platform_view("nato", catalog)
    assert view["platform"] == "nato"
    assert view["styles"] == ["color"]
    assert view["emojis"] is catalog["emojis"]
    assert "platform" not in catalog

    assert select_platform_view("unicode", catalog)["styles"] == []
    assert select_platform_view("unknown", catalog)["platform"] == "fluent"


@pytest.mark.parametrize(
    "unicode, filename",
    [
        ("1f600", "emoji_u1f600"),
        ("1f468-200d-1f469", "emoji_u1f468_200d_1f469"),
        ("U+2764 U+FE0F", "emoji_u2764"),
        ("1F3F3-FE0F-200D-1F308", "emoji_u1f3f3_200d_1f308"),
    ],
)
def test_noto_filename(unicode, filename):
    assert noto_filename(unicode) == filename


def test_fluent_download_uses_resolved_style(catalog):
    options = download_options(catalog["emojis"][0], "fluent", "color", base_url=BASE_URL)
    assert options == [
        {
            "label": "SVG",
            "url": f"{BASE_URL}/assets/grinning-face/Color/grinning_face_color.svg",
            "filename": "grinning-face_color.svg",
        }
    ]


def test_fluent_download_without_assets(catalog):
    assert download_options(catalog["emojis"][2], "fluent", base_url=BASE_URL) == []


def test_noto_download_offers_every_size(catalog):
    options = download_options(catalog["emojis"][2], "nato", base_url=BASE_URL)
    assert [o["label"] for o in options] == [f"PNG {size}px" for size in NOTO_SIZES]
    assert options[0]["url"] == f"{BASE_URL}/nato-emoji/png/32/emoji_u1f468_200d_1f469_200d_1f467.png"
    assert options[-1]["filename"] == "family-man-woman-girl_512px.png"


def test_system_platform_downloads_need_an_asset(catalog):
    assert download_options(catalog["emojis"][2], "unicode", base_url=BASE_URL) == []
    assert len(download_options(catalog["emojis"][1], "unicode", base_url=BASE_URL)) == len(NOTO_SIZES)
