"""String exercises: searching, compressing, rewriting and parsing text."""

import re
from collections import Counter
from itertools import groupby

_VOWELS = frozenset("aeiou")
_MAX_RUN = 9
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_INT_DIGITS = len(str(_INT_MAX))
_LEADING_INTEGER = re.compile(r" *([+-]?)([0-9]+)")


def str_str(haystack, needle):
    """Return the index of the first occurrence of needle in haystack, or -1."""
    if not haystack:
        return -1
    return haystack.find(needle)


def _reaches(source, target):
    return (
        source == target
        or ord(source) + 1 == ord(target)
        or (source == "z" and target == "a")
    )


def can_make_subsequence(str1, str2):
    """Tell whether str2 can be a subsequence of str1 after cyclic increments.

    Each character of str1 may stay as it is or move one letter forward,
    with "z" wrapping round to "a".
    """
    pending = iter(str2)
    target = next(pending, None)
    for char in str1:
        if target is None:
            return True
        if _reaches(char, target):
            target = next(pending, None)
    return target is None


def compressed_string(word):
    """Encode word as count-letter pairs, splitting runs longer than nine."""
    pieces = []
    for char, run in groupby(word):
        remaining = sum(1 for _ in run)
        while remaining:
            taken = min(_MAX_RUN, remaining)
            pieces.append(f"{taken}{char}")
            remaining -= taken
    return "".join(pieces)


def _is_vowel(char):
    return char.lower() in _VOWELS


def reverse_vowels(s):
    """Reverse the order of the vowels in s, leaving other characters in place."""
    positions = [index for index, char in enumerate(s) if _is_vowel(char)]
    chars = list(s)
    for position, source in zip(positions, reversed(positions)):
        chars[position] = s[source]
    return "".join(chars)


def is_subsequence(s, t):
    """Tell whether s can be made by deleting characters from t."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def longest_palindrome(s):
    """Return the length of the longest palindrome buildable from the letters of s."""
    paired = 2 * sum(count // 2 for count in Counter(s).values())
    return paired if paired == len(s) else paired + 1


def compress(chars):
    """Run-length encode a list of single characters in place.

    Each run becomes its character followed by the digits of its length
    when that length is above one. Returns the length of the encoded
    prefix; the items after it are left as they were.
    """
    encoded = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(char)
        if count > 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)


def replace_words(dictionary, sentence):
    """Replace each word that starts with a dictionary root by its shortest root.

    The replacement is made on the first occurrence of the word's text in
    the sentence built so far.
    """
    roots = set(dictionary)
    result = sentence
    last = len(sentence) - 1
    prefix = ""
    word = ""
    for index, char in enumerate(sentence):
        if not prefix and word in roots:
            prefix = word
        if char == " " or index == last:
            if index == last:
                word += char
            if prefix:
                result = result.replace(word, prefix, 1)
            prefix = ""
            word = ""
            continue
        word += char
    return result


def my_atoi(s):
    """Parse a leading signed integer, clamped to the 32-bit signed range.

    Only spaces may come before the number, and the sign, if any, must be
    followed directly by a digit; otherwise the result is 0.
    """
    match = _LEADING_INTEGER.match(s)
    if match is None:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    magnitude = int(digits) if len(digits) <= _INT_DIGITS else _INT_MAX + 1
    value = -magnitude if sign == "-" else magnitude
    return max(_INT_MIN, min(_INT_MAX, value))


def uncommon_from_sentences(s1, s2):
    """Return the words that occur exactly once across both sentences."""
    counts = Counter(s1.split(" ") + s2.split(" "))
    return [word for word, count in counts.items() if count == 1]