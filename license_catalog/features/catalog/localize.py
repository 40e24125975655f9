from __future__ import annotations

from collections.abc import Sequence

from license_catalog.features.catalog.schemas import LocalizedString

DEFAULT_LANGUAGE = "ja"
FALLBACK_LANGUAGE = "en"


def localize(variants: Sequence[LocalizedString] | None, preferred_language: str = DEFAULT_LANGUAGE) -> str:
    """Pick one text out of a list of language-tagged variants.

    Order: first `preferred_language` entry, then first `en` entry, then the
    first entry of any language. Empty input yields "", which callers treat
    as "field absent".
    """

    if not variants:
        return ""
    chosen = (
        next((v for v in variants if v.language == preferred_language), None)
        or next((v for v in variants if v.language == FALLBACK_LANGUAGE), None)
        or variants[0]
    )
    return chosen.text or ""
