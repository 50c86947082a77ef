"""Array and grid exercises: counting, scanning, windows and in-place edits."""

from collections import Counter, defaultdict
from itertools import accumulate, combinations, groupby
from operator import mul

_MEDALS = {1: "Gold Medal", 2: "Silver Medal", 3: "Bronze Medal"}
_LEMONADE_COST = 5


def height_checker(heights):
    """Count the positions where heights differ from their sorted order."""
    return sum(actual != expected for actual, expected in zip(heights, sorted(heights)))


def max_area(height):
    """Return the most water two lines can hold, using two closing pointers."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def unique_occurrences(arr):
    """Tell whether every value occurs a number of times no other value does."""
    counts = list(Counter(arr).values())
    return len(counts) == len(set(counts))


def group_the_people(group_sizes):
    """Split people into groups whose length is the size each member asked for.

    A group that would be left incomplete after splitting is dropped.
    """
    by_size = defaultdict(list)
    for person, size in enumerate(group_sizes):
        by_size[size].append(person)

    groups = []
    for size, members in by_size.items():
        if len(members) > size:
            if size > 0:
                groups.extend(list(chunk) for chunk in zip(*[iter(members)] * size))
        else:
            groups.append(members)
    return groups


def kids_with_candies(candies, extra_candies):
    """For each kid, tell whether the extra candies make them a top holder."""
    most = max(candies)
    return [candy + extra_candies >= most for candy in candies]


def three_consecutive_odds(arr):
    """Tell whether three odd numbers appear in a row."""
    run = 0
    for num in arr:
        if num % 2 == 0:
            run = 0
            continue
        run += 1
        if run >= 3:
            return True
    return False


def majority_element(nums):
    """Return the first value seen more than half the time, or 0 if none is."""
    counts = Counter()
    half = len(nums) // 2
    for num in nums:
        counts[num] += 1
        if counts[num] > half:
            return num
    return 0


def largest_altitude(gain):
    """Return the highest altitude reached from a start at zero."""
    return max(accumulate(gain, initial=0))


def find_difference(nums1, nums2):
    """Return the distinct values only in nums1 and those only in nums2."""
    set1, set2 = set(nums1), set(nums2)
    only_first = [n for n in dict.fromkeys(nums1) if n not in set2]
    only_second = [n for n in dict.fromkeys(nums2) if n not in set1]
    return [only_first, only_second]


def product_except_self(nums):
    """Return, for each position, the product of all the other numbers."""
    if len(nums) == 1:
        raise ValueError("need at least two numbers")
    prefix = list(accumulate(nums, mul))
    suffix = list(accumulate(reversed(nums), mul))[::-1]
    left = [1] + prefix[:-1]
    right = suffix[1:] + [1]
    return [lo * hi for lo, hi in zip(left, right)] if nums else []


def find_max_k(nums):
    """Return the largest k whose negative is also present, or -1."""
    present = set(nums)
    return max((num for num in nums if -num in present), default=-1)


def remove_duplicates(nums):
    """Collapse runs of equal values to the front of nums; return their count."""
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums, val):
    """Move the values other than val to the front of nums; return their count."""
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums):
    """Move every zero to the end of nums, keeping the order of the rest."""
    nonzero = [num for num in nums if num != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def maximum_happiness_sum(happiness, k):
    """Pick k children, each later pick losing one point of happiness, floor 0."""
    if k > len(happiness):
        raise ValueError("cannot select more children than there are")
    ordered = sorted(happiness, reverse=True)
    return sum(max(value - turn, 0) for turn, value in zip(range(k), ordered))


def find_relative_ranks(score):
    """Give each score its medal or its place as a string."""
    places = {value: place for place, value in enumerate(sorted(score, reverse=True), start=1)}
    return [_MEDALS.get(places[value], str(places[value])) for value in score]


def _truncated_remainder(a, b):
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def check_subarray_sum(nums, k):
    """Tell whether a subarray of two or more items sums to a multiple of k."""
    first_seen = {0: -1}
    total = 0
    for index, num in enumerate(nums):
        total += num
        remainder = _truncated_remainder(total, k)
        previous = first_seen.get(remainder, 0)
        first_seen.setdefault(remainder, index)
        if index - previous > 1:
            return True
    return False


def find_max_average(nums, k):
    """Return the largest average of k consecutive numbers."""
    if not 1 <= k <= len(nums):
        raise ValueError("window length must be between 1 and the number of items")
    current = sum(nums[:k])
    best = current
    for leaving, entering in zip(nums, nums[k:]):
        current += entering - leaving
        best = max(best, current)
    return best / k


def pivot_index(nums):
    """Return the first index whose left and right sums match, or -1."""
    total = sum(nums)
    left = 0
    for index, num in enumerate(nums):
        if total - left - num == left:
            return index
        left += num
    return -1


def kth_smallest_prime_fraction(arr, k):
    """Return [numerator, denominator] of the k-th smallest fraction arr[i]/arr[j], i < j."""
    pairs = {}
    values = []
    for numerator, denominator in combinations(arr, 2):
        fraction = numerator / denominator
        pairs[fraction] = [numerator, denominator]
        values.append(fraction)
    if not 1 <= k <= len(values):
        raise IndexError("k is out of range")
    values.sort()
    return list(pairs[values[k - 1]])


def lemonade_change(bills):
    """Tell whether every customer can get correct change for a 5-unit drink."""
    change = Counter()
    for bill in bills:
        change[bill] += 1
        if bill == _LEMONADE_COST:
            continue
        if bill == 10 and change[5] >= 1:
            change[5] -= 1
            continue
        if bill == 20:
            if change[10] >= 1 and change[5] >= 1:
                change[5] -= 1
                change[10] -= 1
                continue
            if change[5] >= 3:
                change[5] -= 3
                continue
        return False
    return True


def _is_open(grid, y, x):
    if not 0 <= y < len(grid) or not 0 <= x < len(grid[y]):
        return True
    return grid[y][x] == 0


def island_perimeter(grid):
    """Count land cell sides that face water or the grid edge."""
    return sum(
        _is_open(grid, y + dy, x + dx)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell != 0
        for dy, dx in ((-1, 0), (1, 0), (0, -1), (0, 1))
    )