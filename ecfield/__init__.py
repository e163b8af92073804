"""
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details

Prime field arithmetic and the short Weierstrass group law.
"""


class EcfieldError(Exception):
    pass


class OutOfRangeError(EcfieldError):
    """
    A field element representative was not less than its modulus.
    """

    pass


class NotOnCurveError(EcfieldError):
    """
    A candidate (x, y) does not satisfy y^2 = x^3 + a*x + b.
    """

    pass


class IncompatibleDomainError(EcfieldError):
    """
    Operands belong to different fields or to different curves. Mixing
    domains is a programming error and is never meaningful, so callers are
    not expected to recover from it.
    """

    pass


class FieldZeroDivisionError(EcfieldError, ZeroDivisionError):
    """
    The zero element has no multiplicative inverse.
    """

    pass


def checkSameDomain(kind, left, right):
    """
    Check that two domain descriptors are equal.

    Args:
        kind str: the domain kind that will appear in error messages.
        left object: the domain of the left operand.
        right object: the domain of the right operand.

    Raises:
        IncompatibleDomainError if left != right.
    """
    if left != right:
        raise IncompatibleDomainError(
            f"cannot combine operands from different {kind}s: {left} and {right}"
        )
