"""Solutions to short string-handling exercises."""

import string
from collections import Counter

_VOWELS = frozenset("aeiouy")
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SEPARATOR = "WUB"
_ABBREVIATION_LIMIT = 10


def game_winner(results: str) -> str:
    """Decide who won more games: 'A' marks Anton's wins, anything else Danik's."""
    anton = results.count("A")
    danik = len(results) - anton
    if anton == danik:
        return "Friendship"
    return "Anton" if anton > danik else "Danik"


def distinct_letters(text: str) -> int:
    """Count the distinct lowercase Latin letters in a set written like '{a, b}'."""
    return len({ch for ch in text if "a" <= ch <= "z"})


def undub(remix: str) -> str:
    """Recover the original words from a dubstep remix separated by 'WUB'."""
    words: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(remix):
        if remix.startswith(_SEPARATOR, i) and i + len(_SEPARATOR) <= len(remix):
            if current:
                words.append("".join(current))
                current = []
            i += len(_SEPARATOR)
        else:
            current.append(remix[i])
            i += 1
    if current:
        words.append("".join(current))
    return " ".join(words)


def helpful_maths(expression: str) -> str:
    """Rewrite a sum of 1s, 2s and 3s with the summands in non-decreasing order."""
    digits = sorted(ch for ch in expression if "1" <= ch <= "3")
    return "+".join(digits)


def stones_to_remove(colors: str) -> int:
    """Count stones to take away so that no two neighbouring stones share a colour."""
    return sum(1 for left, right in zip(colors, colors[1:]) if left == right)


def string_task(word: str) -> str:
    """Drop vowels, lowercase the rest and put a '.' before every consonant."""
    lowered = word.translate(_TO_LOWER)
    return "".join(f".{ch}" for ch in lowered if ch not in _VOWELS)


def is_translation(word: str, candidate: str) -> bool:
    """Tell whether ``candidate`` is ``word`` written backwards."""
    return word[::-1] == candidate


def abbreviate(word: str) -> str:
    """Shorten words longer than ten characters to first letter, count, last letter."""
    if len(word) <= _ABBREVIATION_LIMIT:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def fix_word_case(word: str) -> str:
    """Convert the word to the case that needs fewer letter changes, lowercase on ties."""
    counts = Counter("upper" if "A" <= ch <= "Z" else "lower" for ch in word)
    if counts["lower"] < counts["upper"]:
        return word.translate(_TO_UPPER)
    return word.translate(_TO_LOWER)


def capitalize(word: str) -> str:
    """Uppercase the first letter of the word, leaving the rest untouched."""
    if not word:
        return word
    return word[0].translate(_TO_UPPER) + word[1:]


def is_pangram(text: str) -> bool:
    """Tell whether every Latin letter occurs in the text, in either case."""
    return set(string.ascii_lowercase) <= set(text.lower())


def produces_output(program: str) -> bool:
    """Tell whether an HQ9+ program prints anything."""
    return any(ch in "HQ9" for ch in program)


def hulk_feelings(layers: int) -> str:
    """Describe Hulk's feelings with the given number of alternating layers."""
    if layers <= 0:
        return ""
    feelings = ("I hate" if layer % 2 == 0 else "I love" for layer in range(layers))
    return " that ".join(feelings) + " it"