"""Supported locales and the localized labels for categories, styles and platforms."""

from __future__ import annotations

DEFAULT_LOCALE = "en"

LOCALES = ("en", "zh-CN", "zh-TW", "ja", "ko", "pt-BR")

LOCALE_NAMES = {
    "en": "English",
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "ja": "日本語",
    "ko": "한국어",
    "pt-BR": "Português",
}

CATEGORIES = (
    "Activities",
    "Animals & Nature",
    "Flags",
    "Food & Drink",
    "Objects",
    "People & Body",
    "Smileys & Emotion",
    "Symbols",
    "Travel & Places",
)

STYLES = ("3d", "color", "flat", "high-contrast")

PLATFORMS = ("fluent", "nato", "unicode")

CATEGORY_LABELS = {
    "en": {
        "Activities": "Activities",
        "Animals & Nature": "Animals & Nature",
        "Flags": "Flags",
        "Food & Drink": "Food & Drink",
        "Objects": "Objects",
        "People & Body": "People & Body",
        "Smileys & Emotion": "Smileys & Emotion",
        "Symbols": "Symbols",
        "Travel & Places": "Travel & Places",
    },
    "zh-CN": {
        "Activities": "活动",
        "Animals & Nature": "动物与自然",
        "Flags": "旗帜",
        "Food & Drink": "食物与饮料",
        "Objects": "物品",
        "People & Body": "人物与身体",
        "Smileys & Emotion": "笑脸与情感",
        "Symbols": "符号",
        "Travel & Places": "旅行与地点",
    },
    "zh-TW": {
        "Activities": "活動",
        "Animals & Nature": "動物與自然",
        "Flags": "旗幟",
        "Food & Drink": "食物與飲料",
        "Objects": "物品",
        "People & Body": "人物與身體",
        "Smileys & Emotion": "笑臉與情感",
        "Symbols": "符號",
        "Travel & Places": "旅行與地點",
    },
    "ja": {
        "Activities": "アクティビティ",
        "Animals & Nature": "動物と自然",
        "Flags": "旗",
        "Food & Drink": "食べ物と飲み物",
        "Objects": "物",
        "People & Body": "人と体",
        "Smileys & Emotion": "スマイリーと感情",
        "Symbols": "記号",
        "Travel & Places": "旅行と場所",
    },
    "ko": {
        "Activities": "활동",
        "Animals & Nature": "동물 및 자연",
        "Flags": "깃발",
        "Food & Drink": "음식 및 음료",
        "Objects": "사물",
        "People & Body": "사람 및 신체",
        "Smileys & Emotion": "스마일리 및 감정",
        "Symbols": "기호",
        "Travel & Places": "여행 및 장소",
    },
    "pt-BR": {
        "Activities": "Atividades",
        "Animals & Nature": "Animais e Natureza",
        "Flags": "Bandeiras",
        "Food & Drink": "Comida e Bebida",
        "Objects": "Objetos",
        "People & Body": "Pessoas e Corpo",
        "Smileys & Emotion": "Carinhas e Emoções",
        "Symbols": "Símbolos",
        "Travel & Places": "Viagens e Lugares",
    },
}

STYLE_LABELS = {
    "en": {"3d": "3D", "color": "Color", "flat": "Flat", "high-contrast": "High Contrast"},
    "zh-CN": {"3d": "3D", "color": "彩色", "flat": "扁平", "high-contrast": "高对比度"},
    "zh-TW": {"3d": "3D", "color": "彩色", "flat": "扁平", "high-contrast": "高對比度"},
    "ja": {"3d": "3D", "color": "カラー", "flat": "フラット", "high-contrast": "ハイコントラスト"},
    "ko": {"3d": "3D", "color": "컬러", "flat": "플랫", "high-contrast": "고대비"},
    "pt-BR": {"3d": "3D", "color": "Colorido", "flat": "Plano", "high-contrast": "Alto Contraste"},
}

PLATFORM_LABELS = {
    "en": {"fluent": "Fluent Emoji", "nato": "Noto Emoji", "unicode": "System Emoji"},
    "zh-CN": {"fluent": "Fluent 表情", "nato": "Noto 表情", "unicode": "系统表情"},
    "zh-TW": {"fluent": "Fluent 表情", "nato": "Noto 表情", "unicode": "系統表情"},
    "ja": {"fluent": "Fluent 絵文字", "nato": "Noto 絵文字", "unicode": "システム絵文字"},
    "ko": {"fluent": "Fluent 이모지", "nato": "Noto 이모지", "unicode": "시스템 이모지"},
    "pt-BR": {"fluent": "Emoji Fluent", "nato": "Emoji Noto", "unicode": "Emoji do Sistema"},
}

_TABLES = (
    ("categories", CATEGORY_LABELS, CATEGORIES),
    ("styles", STYLE_LABELS, STYLES),
    ("platforms", PLATFORM_LABELS, PLATFORMS),
)


def normalize_locale(value: str | None) -> str:
    """Map a tag such as ``zh-hant-tw`` or ``pt_PT`` onto a supported locale."""
    raw = (value or "").strip().replace("_", "-")
    if not raw:
        return DEFAULT_LOCALE
    for locale in LOCALES:
        if raw.lower() == locale.lower():
            return locale

    lowered = raw.lower()
    if lowered.startswith("zh"):
        traditional = ("hant", "tw", "hk", "mo")
        return "zh-TW" if any(part in lowered.split("-") for part in traditional) else "zh-CN"
    language = lowered.split("-")[0]
    for locale in LOCALES:
        if locale.lower().split("-")[0] == language:
            return locale
    return DEFAULT_LOCALE


def validate_labels() -> list[str]:
    """Return ``"<table>.<locale>.<key>"`` for every missing label."""
    missing = []
    for table_name, table, keys in _TABLES:
        for locale in LOCALES:
            labels = table.get(locale, {})
            missing.extend(f"{table_name}.{locale}.{key}" for key in keys if not labels.get(key))
    return missing


def _label(table: dict, key: str, locale: str) -> str:
    return table.get(locale, {}).get(key) or table[DEFAULT_LOCALE].get(key) or key


def category_label(group: str, locale: str) -> str:
    return _label(CATEGORY_LABELS, group, locale)


def style_label(style: str, locale: str) -> str:
    return _label(STYLE_LABELS, style, locale)


def platform_label(platform: str, locale: str) -> str:
    return _label(PLATFORM_LABELS, platform, locale)
