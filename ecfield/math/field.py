"""
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details

Arithmetic over the prime field GF(p) using Python's arbitrary precision
integers.
"""

from ecfield import FieldZeroDivisionError, OutOfRangeError, checkSameDomain


class FieldElement:
    """
    FieldElement is an immutable element of the prime field GF(prime).

    The representative num is always held in canonical form, 0 <= num < prime.
    Every operation reduces its result back into that range and returns a new
    FieldElement, so operands are never modified.

    Binary operations are only defined between elements sharing the same
    prime.  Combining elements of different fields raises
    IncompatibleDomainError.  The prime itself is assumed to be prime and is
    not checked.
    """

    __slots__ = ("_num", "_prime")

    def __init__(self, num, prime):
        """
        Args:
            num (int): The representative. Negative values are reduced into
                [0, prime).
            prime (int): The field modulus.

        Raises:
            OutOfRangeError: num is not less than prime.
        """
        if not isinstance(num, int) or not isinstance(prime, int):
            raise TypeError(
                f"FieldElement requires int arguments, got {type(num)} and {type(prime)}"
            )
        if num >= prime:
            raise OutOfRangeError(f"num {num} not in field range 0 to {prime - 1}")
        self._num = num % prime
        self._prime = prime

    @staticmethod
    def fromHex(hexString, prime):
        """
        fromHex decodes the big-endian hex string into a field element.

        Args:
            hexString (str): the hex string. An optional 0x prefix is accepted.
            prime (int): the field modulus.

        Returns:
            FieldElement: the created element.
        """
        return FieldElement(int(hexString, 16), prime)

    @property
    def num(self):
        return self._num

    @property
    def prime(self):
        return self._prime

    def _coerce(self, other):
        """
        Convert the right-hand operand of a binary operation into an element of
        this field.  Plain integers are reduced into the field, which allows
        scalar multiples such as 3 * x.
        """
        if isinstance(other, FieldElement):
            checkSameDomain("field", self._prime, other._prime)
            return other
        if isinstance(other, int):
            return FieldElement(other % self._prime, self._prime)
        return None

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._num == other._num and self._prime == other._prime

    def __hash__(self):
        return hash((self._num, self._prime))

    def __repr__(self):
        return f"FieldElement({self._num},{self._prime})"

    __str__ = __repr__

    def __add__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        checkSameDomain("field", self._prime, other._prime)
        return FieldElement((self._num + other._num) % self._prime, self._prime)

    def __sub__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        checkSameDomain("field", self._prime, other._prime)
        return FieldElement((self._num - other._num) % self._prime, self._prime)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement((self._num * other._num) % self._prime, self._prime)

    __rmul__ = __mul__

    def __neg__(self):
        return FieldElement(-self._num % self._prime, self._prime)

    def isZero(self):
        return self._num == 0

    def pow(self, exponent):
        """
        pow raises the element to an integer power.

        Negative exponents are rewritten with Fermat's little theorem.  Since
        x^(p-1) = 1 for non-zero x, adding (p - 1) to the exponent does not
        change the result, so multiples of (p - 1) are added until the
        exponent is non-negative.

        Args:
            exponent (int): the exponent, possibly negative.

        Returns:
            FieldElement: self^exponent.

        Raises:
            FieldZeroDivisionError: self is zero and exponent is negative.
        """
        if not isinstance(exponent, int):
            raise TypeError(f"exponent must be an int, got {type(exponent)}")
        if exponent < 0:
            if self._num == 0:
                raise FieldZeroDivisionError(
                    f"zero element of GF({self._prime}) has no inverse"
                )
            order = self._prime - 1
            # Smallest k with exponent + k*order >= 0.
            exponent += -(exponent // order) * order
        return FieldElement(pow(self._num, exponent, self._prime), self._prime)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def inverse(self):
        """
        inverse returns the multiplicative inverse, self^(p-2).
        """
        if self._num == 0:
            raise FieldZeroDivisionError(
                f"zero element of GF({self._prime}) has no inverse"
            )
        return FieldElement(
            pow(self._num, self._prime - 2, self._prime), self._prime
        )

    def div(self, divisor):
        """
        div divides by another element of the same field or by an integer.

        Since b^(p-1) = 1, b^-1 = b^(p-2), so a / b = a * b^(p-2).

        Args:
            divisor (FieldElement or int): the divisor. An int is reduced
                into the field first.

        Returns:
            FieldElement: self / divisor.

        Raises:
            FieldZeroDivisionError: divisor is the zero element.
            IncompatibleDomainError: divisor belongs to a different field.
        """
        d = self._coerce(divisor)
        if d is None:
            raise TypeError(f"cannot divide FieldElement by {type(divisor)}")
        return self * d.inverse()

    def __truediv__(self, other):
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.div(other)
