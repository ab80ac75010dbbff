"""
Prime field arithmetic for Shamir's Secret Sharing.

Every operation reduces against the caller's prime modulus. Nothing here
holds state, so the same functions serve any number of concurrent splits
and reconstructions.
"""


def mod_inverse(a: int, prime: int) -> int:
    """Modular multiplicative inverse of a in the prime field."""
    if a % prime == 0:
        raise ZeroDivisionError("0 has no inverse modulo the prime")
    return pow(a, -1, prime)


def evaluate_polynomial(coefficients: list[int], x: int, prime: int) -> int:
    """
    Evaluate a polynomial at x in the prime field using Horner's method.

    coefficients[0] is the constant term. Iterates from the highest-degree
    coefficient down, reducing at every step.
    """
    result = 0
    for coeff in reversed(coefficients):
        result = (result * x + coeff) % prime
    return result


def interpolate_at_zero(xs: list[int], ys: list[int], prime: int) -> int:
    """
    Lagrange interpolation evaluated at x=0.

    Recovers f(0) from len(xs) sample points. The xs must be distinct
    modulo the prime, otherwise a basis denominator is zero and
    mod_inverse raises ZeroDivisionError.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")

    result = 0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            numerator = (numerator * (0 - xj)) % prime
            denominator = (denominator * (xi - xj)) % prime

        term = (yi * numerator * mod_inverse(denominator, prime)) % prime
        result = (result + term) % prime

    return result
