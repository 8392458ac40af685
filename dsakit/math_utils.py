"""Small integer and floating-point helpers: Fibonacci, gcd, lcm and square root."""

from __future__ import annotations

DEFAULT_EPS = 1e-9


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError(f"fibonacci is defined for n >= 1, got {n}")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(a, 0) is a."""
    while b:
        a, b = b, _truncated_remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as a * b / gcd(a, b)."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of 0 and 0 is undefined")
    product = a * b
    quotient = abs(product) // abs(divisor)
    return quotient if (product < 0) == (divisor < 0) else -quotient


def square_root(x: float, eps: float = DEFAULT_EPS) -> float:
    """Approximate the square root of x by bisection over the interval [0, x].

    The search interval is [0, x], so the result is only meaningful for x >= 1;
    for smaller x the result approaches x itself, and for negative x it is 0.
    """
    low, high = 0.0, float(x)
    while high - low > eps:
        middle = (low + high) / 2
        if middle * middle > x:
            high = middle
        else:
            low = middle
    return low