"""
Dictionary Loading

Parses raw word-list text into the word set and the length buckets used by the
graph builder and the random pair generator.
"""

import re
from collections import Counter
from typing import Dict, Iterable, List, Set, Tuple

from ..config.ladder_settings import WORD_PATTERN

_WORD_RE = re.compile(WORD_PATTERN)


class DictionaryLoadError(Exception):
    """Raised when a dictionary source cannot be read or yields no usable words."""


def extract_word(line: str):
    """
    Take the last whitespace-delimited token of a line as the candidate word.

    Returns:
        The lowercased word, or None if the line holds no acceptable word
    """
    parts = line.split()
    if not parts:
        return None
    word = parts[-1].lower()
    return word if _WORD_RE.match(word) else None


def parse_word_lines(lines: Iterable[str]) -> Tuple[Set[str], Dict[int, Set[str]]]:
    """
    Build the word set and the words-by-length mapping from raw lines.

    Blank lines are skipped. Lines whose last token is not purely alphabetic are
    dropped silently, unless no line at all produced a word.

    Returns:
        Tuple of (word set, mapping of length to words of that length)

    Raises:
        DictionaryLoadError: If the source had content but no acceptable word
    """
    words: Set[str] = set()
    content_lines = 0

    for line in lines:
        if not isinstance(line, str):
            raise DictionaryLoadError(f"Dictionary line is not text: {line!r}")
        if not line.strip():
            continue
        content_lines += 1
        word = extract_word(line)
        if word is not None:
            words.add(word)

    if content_lines and not words:
        raise DictionaryLoadError(
            f"Dictionary has {content_lines} non-blank lines but no valid words"
        )

    words_by_length: Dict[int, Set[str]] = {}
    for word in words:
        words_by_length.setdefault(len(word), set()).add(word)

    return words, words_by_length


def load_word_lines(path: str) -> List[str]:
    """
    Read a dictionary file.

    Raises:
        DictionaryLoadError: If the file is missing, unreadable or not UTF-8 text
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except FileNotFoundError as e:
        raise DictionaryLoadError(f"Word list file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"Word list file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise DictionaryLoadError(f"Word list file could not be read: {path}: {e}") from e


def get_dictionary_statistics(words_by_length: Dict[int, Set[str]]) -> dict:
    """
    Analyzes the loaded dictionary for monitoring.

    Returns:
        dict: total_words, words_by_length (length -> count) and most_common_letters
    """
    total = sum(len(words) for words in words_by_length.values())
    if not total:
        return {"total_words": 0, "words_by_length": {}, "most_common_letters": []}

    letter_frequency = Counter()
    for words in words_by_length.values():
        for word in words:
            letter_frequency.update(word)

    return {
        "total_words": total,
        "words_by_length": {length: len(words) for length, words in sorted(words_by_length.items())},
        "most_common_letters": letter_frequency.most_common(5)
    }
