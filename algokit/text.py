"""Small text exercises: acronyms, greetings, isograms, RNA strands and word counts."""

from __future__ import annotations

MAX_WORDS = 20
MAX_WORD_LENGTH = 50

_RNA_COMPLEMENT = {"G": "C", "C": "G", "T": "A", "A": "U"}


class WordCountError(ValueError):
    """Raised when a text cannot be counted within the word limits."""

    code = 0


class ExcessiveWordLengthError(WordCountError):
    """Raised when a word is longer than ``MAX_WORD_LENGTH`` characters."""

    code = -1


class TooManyWordsError(WordCountError):
    """Raised when the text holds more words than the limit allows."""

    code = -2


def abbreviate(phrase: str) -> str:
    """Return the upper-cased first letter of every space-separated word."""
    return "".join(word[:1].upper() for word in phrase.split(" "))


def hello() -> str:
    """Return the classic greeting."""
    return "Hello, World!"


def is_isogram(phrase: str) -> bool:
    """Return whether no character occurs more than once in ``phrase``.

    Characters are compared exactly, so case matters.
    """
    return len(set(phrase)) == len(phrase)


def to_rna(strand: str) -> str:
    """Return the RNA complement of a DNA ``strand``.

    Raises ValueError for a character that is not a DNA nucleotide.
    """
    try:
        return "".join(_RNA_COMPLEMENT[base] for base in strand)
    except KeyError as exc:
        raise ValueError(f"invalid nucleotide {exc.args[0]!r} in strand") from None


def word_count(input_text: str, word: str) -> tuple[int, int]:
    """Return the number of words in ``input_text`` and how often ``word`` occurs.

    Words are separated by single spaces. Every word followed by a space may
    be at most ``MAX_WORD_LENGTH`` characters long, and at most
    ``MAX_WORDS + 1`` words may be followed by a space.
    """
    parts = input_text.split(" ")
    for index, part in enumerate(parts[:-1]):
        if len(part) > MAX_WORD_LENGTH:
            raise ExcessiveWordLengthError(
                f"word {part!r} is longer than {MAX_WORD_LENGTH} characters"
            )
        if index > MAX_WORDS:
            raise TooManyWordsError(f"text holds more than {MAX_WORDS} words")
    return len(parts), parts.count(word)