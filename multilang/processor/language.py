"""Canonicalization of detected language codes."""

import re
from collections.abc import Collection

from multilang.processor.models import UNKNOWN_LANGUAGE

# ISO 639-2/639-3 codes for the default supported languages.
_THREE_LETTER_ALIASES: dict[str, str] = {
    "eng": "en",
    "spa": "es",
    "fra": "fr",
    "fre": "fr",
    "deu": "de",
    "ger": "de",
    "ita": "it",
    "por": "pt",
    "nld": "nl",
    "dut": "nl",
    "pol": "pl",
    "rus": "ru",
    "jpn": "ja",
    "kor": "ko",
    "zho": "zh",
    "chi": "zh",
    "cmn": "zh",
    "hin": "hi",
    "ara": "ar",
    "tam": "ta",
    "tel": "te",
    "mal": "ml",
    "kan": "kn",
    "ben": "bn",
    "guj": "gu",
    "mar": "mr",
    "pan": "pa",
    "ori": "or",
    "ory": "or",
}

_SUBTAG_SEPARATOR = re.compile(r"[-_]")


def normalize_language(code: str | None, supported: Collection[str]) -> str:
    """Map a raw detected language code onto *supported* or ``unknown``.

    Never raises.
    """
    if not code:
        return UNKNOWN_LANGUAGE
    primary = _SUBTAG_SEPARATOR.split(code.strip().lower(), 1)[0]
    primary = _THREE_LETTER_ALIASES.get(primary, primary)
    if primary in supported:
        return primary
    return UNKNOWN_LANGUAGE
