"""Unicode Normalization Module
Removes combining marks while keeping base characters in composed form.
"""

import unicodedata

NON_SPACING_MARK = 'Mn'


def strip_marks(text: str | None) -> str:
    """Remove diacritical marks from *text*.

    The string is decomposed (NFD), every non-spacing mark is dropped and the
    remainder is recomposed (NFC). Blank input yields ``''``.
    """
    if not text or text.isspace():
        return ''

    decomposed = unicodedata.normalize('NFD', text)
    kept = ''.join(
        ch for ch in decomposed if unicodedata.category(ch) != NON_SPACING_MARK
    )
    return unicodedata.normalize('NFC', kept)
