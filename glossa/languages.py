"""Language names and the codes the gtx endpoint expects."""

from __future__ import annotations

from typing import Dict

from .errors import UnknownLanguageError

AUTO = "auto"

LANGUAGES: Dict[str, str] = {
    "af": "Afrikaans",
    "sq": "Albanian",
    "am": "Amharic",
    "ar": "Arabic",
    "hy": "Armenian",
    "az": "Azerbaijani",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "ceb": "Cebuano",
    "zh-CN": "Chinese (Simplified)",
    "zh-TW": "Chinese (Traditional)",
    "co": "Corsican",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "nl": "Dutch",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "fi": "Finnish",
    "fr": "French",
    "fy": "Frisian",
    "gl": "Galician",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "gu": "Gujarati",
    "ht": "Haitian Creole",
    "ha": "Hausa",
    "haw": "Hawaiian",
    "iw": "Hebrew",
    "hi": "Hindi",
    "hmn": "Hmong",
    "hu": "Hungarian",
    "is": "Icelandic",
    "ig": "Igbo",
    "id": "Indonesian",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jw": "Javanese",
    "kn": "Kannada",
    "kk": "Kazakh",
    "km": "Khmer",
    "ko": "Korean",
    "ku": "Kurdish",
    "ky": "Kyrgyz",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "lt": "Lithuanian",
    "lb": "Luxembourgish",
    "mk": "Macedonian",
    "mg": "Malagasy",
    "ms": "Malay",
    "ml": "Malayalam",
    "mt": "Maltese",
    "mi": "Maori",
    "mr": "Marathi",
    "mn": "Mongolian",
    "my": "Myanmar (Burmese)",
    "ne": "Nepali",
    "no": "Norwegian",
    "ny": "Nyanja (Chichewa)",
    "ps": "Pashto",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "ro": "Romanian",
    "ru": "Russian",
    "sm": "Samoan",
    "gd": "Scots Gaelic",
    "sr": "Serbian",
    "st": "Sesotho",
    "sn": "Shona",
    "sd": "Sindhi",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "es": "Spanish",
    "su": "Sundanese",
    "sw": "Swahili",
    "sv": "Swedish",
    "tl": "Tagalog (Filipino)",
    "tg": "Tajik",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "uz": "Uzbek",
    "vi": "Vietnamese",
    "cy": "Welsh",
    "xh": "Xhosa",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "zu": "Zulu",
}

ALIASES: Dict[str, str] = {
    "chinese": "zh-CN",
    "zh": "zh-CN",
    "he": "iw",
    "filipino": "tl",
    "tagalog": "tl",
    "burmese": "my",
    "chichewa": "ny",
    "farsi": "fa",
    "gaelic": "gd",
}

_BY_CODE: Dict[str, str] = {code.lower(): code for code in LANGUAGES}
_BY_NAME: Dict[str, str] = {name.lower(): code for code, name in LANGUAGES.items()}


def resolve_language(value: str | None, *, allow_auto: bool = False) -> str:
    """Turn a language code or English name into a provider code.

    Codes and names are matched case-insensitively. ``auto`` (and a blank
    value) is only accepted on the source side.
    """

    key = (value or "").strip().lower().replace("_", "-")
    if not key or key == AUTO:
        if allow_auto:
            return AUTO
        raise UnknownLanguageError(
            "A target language is required; automatic detection only applies to the source."
        )

    for table in (_BY_CODE, _BY_NAME, ALIASES):
        if key in table:
            return table[key]

    raise UnknownLanguageError(
        f"Unknown language '{value}'. Use --list-languages to see the supported names and codes."
    )


def language_name(code: str) -> str:
    if code == AUTO:
        return "Detect automatically"
    return LANGUAGES.get(code, code)
