"""String exercises over words, letters and brackets."""

from itertools import takewhile

_VOWELS = frozenset("aeiou")
_BRACKET_PAIRS = {"(": ")", "{": "}", "[": "]"}
_BOARD_FILES = "abcdefgh"


def common_chars(words):
    """Return the letters, with repeats, that appear in every word.

    Letters come out in the order they appear in the longest word.
    """
    if not words:
        raise ValueError("need at least one word")
    longest = max(words, key=len)
    remaining = list(words)
    common = []
    for letter in longest:
        if all(letter in word for word in remaining):
            common.append(letter)
            remaining = [word.replace(letter, "", 1) for word in remaining]
    return common


def longest_common_prefix(strs):
    """Return the longest prefix shared by all the strings."""
    if not strs:
        raise ValueError("need at least one string")
    shared = takewhile(lambda column: len(set(column)) == 1, zip(*strs))
    return "".join(column[0] for column in shared)


def is_prefix_of_word(sentence, search_word):
    """Return the 1-based position of the first word starting with search_word, or -1."""
    current = ""
    position = 1
    for char in sentence:
        current += char
        if current == search_word:
            return position
        if char == " ":
            position += 1
            current = ""
    return -1


def _is_vowel(char):
    return char.lower() in _VOWELS


def max_vowels(s, k):
    """Return the most vowels found in any k consecutive characters."""
    if not 1 <= k <= len(s):
        raise ValueError("window length must be between 1 and the length of the string")
    current = sum(_is_vowel(char) for char in s[:k])
    best = current
    for leaving, entering in zip(s, s[k:]):
        current += _is_vowel(entering) - _is_vowel(leaving)
        best = max(best, current)
    return best


def reverse_words(s):
    """Return the space-separated words in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def merge_alternately(word1, word2):
    """Interleave the two words letter by letter, then append the longer one's rest."""
    longer = word2 if len(word2) > len(word1) else word1
    shared = min(len(word1), len(word2))
    return "".join(a + b for a, b in zip(word1, word2)) + longer[shared:]


def _closes(opening, closing):
    return _BRACKET_PAIRS.get(opening) == closing


def is_valid_parentheses(s):
    """Tell whether the brackets are either mirrored or closed pair by pair.

    A string whose ends match is checked as mirrored; otherwise each pair
    of neighbours from the start must open and close.
    """
    if not s:
        raise ValueError("empty bracket string")
    if len(s) % 2:
        return False
    if _closes(s[0], s[-1]):
        half = len(s) // 2
        return all(_closes(a, b) for a, b in zip(s[:half], reversed(s[half:])))
    return all(_closes(a, b) for a, b in zip(s[::2], s[1::2]))


def reverse_prefix(word, ch):
    """Reverse the part of word up to and including the first ch."""
    index = word.find(ch)
    if index == -1:
        return word
    return word[index::-1] + word[index + 1:]


def add_spaces(s, spaces):
    """Insert a space before each listed index, taken in the order given."""
    pending = iter(spaces)
    next_space = next(pending, None)
    pieces = []
    for index, char in enumerate(s):
        if index == next_space:
            pieces.append(" ")
            next_space = next(pending, None)
        pieces.append(char)
    return "".join(pieces)


def square_is_white(coordinates):
    """Tell whether a chessboard square such as "a1" is white."""
    file_letter, rank = coordinates[0], ord(coordinates[1])
    if file_letter not in _BOARD_FILES:
        return False
    file_is_dark_on_odd = _BOARD_FILES.index(file_letter) % 2 == 0
    if file_is_dark_on_odd:
        return rank % 2 == 0
    return rank % 2 != 0