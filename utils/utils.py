import re
from typing import List

# Characters that separate tokens in the input text
DELIMITERS = (" ", "\t", "\n", "\r", ",", ".", "!", "?", "|", "(", ")", "$", "=", "-")

VOWELS = frozenset("aeiouAEIOU")

_SPLIT_RE = re.compile("[" + re.escape("".join(DELIMITERS)) + "]+")
_NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def split_tokens(text: str) -> List[str]:
    """Split text on the fixed delimiter set, dropping empty fragments."""
    if not text:
        return []
    return [token for token in _SPLIT_RE.split(text) if token]


def clean_text(text: str) -> str:
    """
    Keep ASCII letters only.
    Digits, apostrophes, underscores and any other symbol are removed,
    not treated as split points ("o'o" becomes "oo").
    """
    if not text:
        return ""
    return _NON_LETTER_RE.sub("", text)


def is_vowel(char: str) -> bool:
    return char in VOWELS


def is_vowel_word(word: str) -> bool:
    """True for a non-empty word made only of a, e, i, o, u in any case."""
    return bool(word) and all(is_vowel(c) for c in word)


def extract_unique_vowel_words(text: str) -> List[str]:
    """Return the all-vowel words of text, in first-seen order, without duplicates.

    Duplicates are exact (case-sensitive) matches, so "AEI" and "aei"
    are both kept. Mixed words such as "aeb" are dropped entirely.
    """
    words, seen = [], set()
    for token in split_tokens(text):
        word = clean_text(token)
        if not is_vowel_word(word) or word in seen:
            continue
        words.append(word)
        seen.add(word)
    return words
