import pytest

from emojidir.codec import expand_catalog, group_by_category


def make_record(emoji_id, name, glyph, group, keywords, unicode, tts="", styles=None, i18n=None):
    record = {
        "i": emoji_id,
        "n": name,
        "gl": glyph,
        "gr": group,
        "k": list(keywords),
        "u": unicode,
        "t": tts or name.lower(),
        "s": dict(styles or {}),
    }
    if i18n:
        record["i18n"] = i18n
    return record


def make_index(records, generated_at="2024-01-01T00:00:00.000Z"):
    categories = sorted({record["gr"] for record in records})
    return {
        "e": records,
        "c": categories,
        "ec": group_by_category(records, categories, group_key="gr"),
        "tc": len(records),
        "g": generated_at,
    }


@pytest.fixture
def compact_index():
    return make_index(
        [
            make_record(
                "grinning-face",
                "Grinning Face",
                "😀",
                "Smileys & Emotion",
                ["happy", "smile"],
                "1f600",
                styles={
                    "3": "assets/grinning-face/3D/grinning_face_3d.png",
                    "c": "assets/grinning-face/Color/grinning_face_color.svg",
                    "hd": "assets/grinning-face/default/High Contrast/grinning_face_high_contrast_default.svg",
                    "animated": "assets/grinning-face/Animated/grinning_face.gif",
                },
            ),
            make_record(
                "dog-face",
                "Dog Face",
                "🐶",
                "Animals & Nature",
                ["dog", "pet"],
                "1f436",
                styles={"f": "assets/dog-face/Flat/dog_face_flat.svg"},
                i18n={"ja": {"n": "犬の顔", "k": ["犬"], "t": "犬の顔"}},
            ),
            make_record(
                "family-man-woman-girl",
                "Family: Man, Woman, Girl",
                "👨‍👩‍👧",
                "People & Body",
                ["family"],
                "1f468-200d-1f469-200d-1f467",
            ),
        ]
    )


@pytest.fixture
def catalog(compact_index):
    return expand_catalog(compact_index)


@pytest.fixture
def zh_overlay(compact_index):
    records = [
        make_record(
            "grinning-face",
            "Grinning Face",
            "😀",
            "Smileys & Emotion",
            ["happy", "smile"],
            "1f600",
            i18n={"zh-CN": {"n": "笑脸", "k": ["开心"], "t": "笑脸"}},
        ),
        make_record(
            "dog-face",
            "Dog Face",
            "🐶",
            "Animals & Nature",
            ["dog", "pet"],
            "1f436",
            i18n={"zh-CN": {"n": "狗脸", "k": ["狗", "宠物"], "t": "狗脸"}},
        ),
    ]
    return expand_catalog(make_index(records))
