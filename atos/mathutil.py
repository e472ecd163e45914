"""Integer and bit helpers with the semantics of the system math library."""

import math

U32_MASK = 0xFFFFFFFF


def ipow(base, exp):
    """``base`` multiplied by itself ``exp`` times; 1 when ``exp`` is not positive."""
    return base**exp if exp > 0 else 1


def fpow(base, exp):
    """Float power by repeated multiplication; a fractional exponent rounds up."""
    if exp <= 0:
        return 1.0
    result = 1.0
    for _ in range(math.ceil(exp)):
        result *= base
    return result


def isqrt(x):
    """Floor of the square root of ``x``; 0 for non-positive input."""
    return math.isqrt(x) if x > 0 else 0


def fsqrt(x):
    """Coarse square root found by stepping a bisection in whole units.

    The result ``r`` always satisfies ``r * r <= x``; it is 0.0 for
    non-positive input.
    """
    left = 0.0
    right = float(x)
    while left < right:
        mid = (left + right + 1.0) / 2.0
        if mid <= x / mid:
            left = mid
        else:
            right = mid - 1.0
    return left


def round_up(x):
    """Round up to the next even number."""
    return (x + 1) & ~1


def round_down(x):
    """Round down to an even number."""
    return x & ~1


def round_to_nearest(x):
    """Round to an even number, halves going up."""
    return (x + 1) & ~1


def range_overlap(a_start, a_len, b_start, b_len):
    """True when the half-open ranges overlap (32-bit wrapping ends)."""
    a_end = (a_start + a_len) & U32_MASK
    b_end = (b_start + b_len) & U32_MASK
    return not (a_end <= b_start or b_end <= a_start)


def align_up(x, align):
    """Round ``x`` up to a multiple of the power of two ``align``."""
    return (x + align - 1) & ~(align - 1)


def align_down(x, align):
    """Round ``x`` down to a multiple of the power of two ``align``."""
    return x & ~(align - 1)


def clamp(x, low, high):
    """Limit ``x`` to the range ``low``..``high``."""
    return max(low, min(x, high))


def sign(x):
    """-1 for negative numbers, 1 otherwise (zero counts as positive)."""
    negative = x < 0
    return 1 - 2 * int(negative)