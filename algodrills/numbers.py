"""Number exercises: a recurrence, spelling numbers out and bit complements."""

_ONES = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")
_SCALES = ("", "Thousand", "Million", "Billion")
_LIMIT = 1000 ** len(_SCALES)


def tribonacci(n):
    """Return the n-th tribonacci number, starting 0, 1, 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    a, b, c = 0, 1, 1
    for _ in range(3, n + 1):
        a, b, c = b, c, a + b + c
    return c


def _below_hundred(num):
    if num < 20:
        return _ONES[num]
    tens, ones = divmod(num, 10)
    return f"{_TENS[tens]} {_ONES[ones]}" if ones else _TENS[tens]


def _below_thousand(num):
    hundreds, rest = divmod(num, 100)
    parts = []
    if hundreds:
        parts.append(f"{_ONES[hundreds]} Hundred")
    if rest:
        parts.append(_below_hundred(rest))
    return " ".join(parts)


def number_to_words(num):
    """Spell a non-negative integer below one trillion in English words."""
    if not 0 <= num < _LIMIT:
        raise ValueError("number must be between 0 and 999,999,999,999")
    if num == 0:
        return "Zero"
    groups = []
    while num:
        num, group = divmod(num, 1000)
        groups.append(group)
    spelled = [
        f"{_below_thousand(group)} {_SCALES[scale]}".rstrip()
        for scale, group in reversed(list(enumerate(groups)))
        if group
    ]
    return " ".join(spelled)


def find_complement(num):
    """Flip every bit of num below its highest set bit."""
    if num < 0:
        raise ValueError("number must not be negative")
    return num ^ ((1 << num.bit_length()) - 1)