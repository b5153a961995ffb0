"""Small classic exercises: Roman numerals, parentheses, scheduling and more."""

from __future__ import annotations

from collections.abc import Sequence

_LEADING_SYMBOLS = (("M", 1000), ("D", 500), ("C", 100), ("L", 50), ("X", 10))

_UNIT_TAILS = {
    "I": 1,
    "II": 2,
    "III": 3,
    "IV": 4,
    "V": 5,
    "VI": 6,
    "VII": 7,
    "VIII": 8,
    "IX": 9,
}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Leading runs of M, D, C, L and X are added up in that order; whatever
    remains must be one of the unit forms I to IX to count.  A remainder
    that is not such a form adds nothing.
    """
    total = 0
    pos = 0
    for symbol, value in _LEADING_SYMBOLS:
        while s.startswith(symbol, pos):
            total += value
            pos += 1
    return total + _UNIT_TAILS.get(s[pos:], 0)


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses.

    The strings come in lexicographic order, ``(`` before ``)``.
    """
    results: list[str] = []
    current: list[str] = []

    def extend(open_left: int, close_left: int) -> None:
        if open_left == 0 and close_left == 0:
            results.append("".join(current))
            return
        if open_left > 0:
            current.append("(")
            extend(open_left - 1, close_left)
            current.pop()
        if close_left > 0 and open_left < close_left:
            current.append(")")
            extend(open_left, close_left - 1)
            current.pop()

    if n >= 0:
        extend(n, n)
    return results


def activity_selection(start: Sequence[int], end: Sequence[int]) -> int:
    """Return the largest number of non-overlapping activities.

    An activity occupies every day from its start to its end inclusive.
    """
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    activities = sorted(zip(end, start))
    if not activities:
        return 0
    count = 1
    last_end = activities[0][0]
    for finish, begin in activities[1:]:
        if begin > last_end:
            count += 1
            last_end = finish
    return count


def power(base, exponent: int):
    """Raise ``base`` to a non-negative integer ``exponent`` by squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent % 2 == 0:
            base *= base
            exponent //= 2
        else:
            result *= base
            exponent -= 1
    return result


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    student_count = 1
    page_sum = 0
    for book in pages:
        if page_sum + book <= limit:
            page_sum += book
        else:
            student_count += 1
            if student_count > students or book > limit:
                return False
            page_sum = book
    return True


def book_allocation(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student reads.

    Books are handed out in order as contiguous runs.
    """
    if students < 1:
        raise ValueError("at least one student is required")
    low, high = 0, sum(pages)
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if _fits(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError("no allocation is possible")
    return answer