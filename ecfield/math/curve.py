"""
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecfield developers
See LICENSE for details

Points on short Weierstrass curves y^2 = x^3 + a*x + b over a prime field,
and the chord-and-tangent group law in affine coordinates.

References:
  [SEC1] Elliptic Curve Cryptography
    https://www.secg.org/sec1-v2.pdf

  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)
"""

from ecfield import IncompatibleDomainError, NotOnCurveError, checkSameDomain
from ecfield.util import helpers

from .field import FieldElement


log = helpers.getLogger("CURVE")


def fromHex(hx):
    return int(hx, 16)


def _checkElements(**elements):
    for name, v in elements.items():
        if not isinstance(v, FieldElement):
            raise TypeError(f"{name} must be a FieldElement, got {type(v)}")


def _checkCurveParams(a, b):
    _checkElements(a=a, b=b)
    checkSameDomain("field", a.prime, b.prime)


class CurvePoint:
    """
    CurvePoint is an immutable point on the curve y^2 = x^3 + a*x + b, or the
    point at infinity of that curve.

    Finite points are validated against the curve equation when they are
    constructed and never again. The point at infinity carries no coordinates,
    x and y are None, and isInfinity is authoritative.
    """

    __slots__ = ("_x", "_y", "_a", "_b")

    def __init__(self, x, y, a, b):
        """
        Args:
            x (FieldElement): the x coordinate.
            y (FieldElement): the y coordinate.
            a (FieldElement): the curve's a parameter.
            b (FieldElement): the curve's b parameter.

        Raises:
            NotOnCurveError: y^2 != x^3 + a*x + b.
            IncompatibleDomainError: the four elements do not share a prime.
        """
        _checkElements(x=x, y=y)
        _checkCurveParams(a, b)
        checkSameDomain("field", x.prime, a.prime)
        checkSameDomain("field", y.prime, a.prime)
        if y ** 2 != x ** 3 + a * x + b:
            raise NotOnCurveError(f"{x}, {y} is not on curve (a: {a}, b: {b})")
        self._x = x
        self._y = y
        self._a = a
        self._b = b

    @classmethod
    def infinity(cls, a, b):
        """
        infinity returns the identity element of the curve (a, b).
        """
        _checkCurveParams(a, b)
        p = cls.__new__(cls)
        p._x = None
        p._y = None
        p._a = a
        p._b = b
        return p

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def isInfinity(self):
        return self._x is None

    @property
    def curve(self):
        """
        The Curve this point belongs to.
        """
        return Curve(self._a, self._b)

    def _checkSameCurve(self, other):
        if self._a != other._a or self._b != other._b:
            raise IncompatibleDomainError(
                "cannot add points on different curves: "
                f"(a: {self._a}, b: {self._b}) and (a: {other._a}, b: {other._b})"
            )

    def __eq__(self, other):
        """
        Two points are equal if both are the point at infinity of the same
        curve, or if both are finite with equal coordinates and curve
        parameters.
        """
        if not isinstance(other, CurvePoint):
            return NotImplemented
        if self._a != other._a or self._b != other._b:
            return False
        if self.isInfinity or other.isInfinity:
            return self.isInfinity and other.isInfinity
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y, self._a, self._b))

    def __repr__(self):
        curve = f"{self._a.num}_{self._b.num} FieldElement({self._a.prime})"
        if self.isInfinity:
            return f"CurvePoint(infinity)_{curve}"
        return f"CurvePoint({self._x.num},{self._y.num})_{curve}"

    __str__ = __repr__

    def __neg__(self):
        """
        The reflection of the point over the x axis, (x, -y).
        """
        if self.isInfinity:
            return self
        return CurvePoint(self._x, -self._y, self._a, self._b)

    def __add__(self, other):
        """
        Add two points with the chord-and-tangent rule.

        The addition is total for points on the same curve.  The cases are:
          1. either point is the point at infinity, the identity.
          2. distinct x coordinates, the chord through both points.
          3. equal x with y = 0 or with opposite y, a vertical line. The sum is
             the point at infinity.
          4. the same point, the tangent at that point.

        Every finite result is built through the validating constructor.
        """
        if not isinstance(other, CurvePoint):
            return NotImplemented
        self._checkSameCurve(other)

        if self.isInfinity:
            return other
        if other.isInfinity:
            return self

        x1, y1, x2, y2 = self._x, self._y, other._x, other._y
        if x1 != x2:
            s = (y2 - y1) / (x2 - x1)
            x3 = s ** 2 - x1 - x2
            y3 = s * (x1 - x3) - y1
            return CurvePoint(x3, y3, self._a, self._b)

        # Same x. Either the vertical tangent at a point of order two, or
        # other is the reflection of self.
        if y1.isZero() or y1 != y2:
            return self.infinity(self._a, self._b)

        log.debug("doubling %s", self)
        s = (3 * x1 ** 2 + self._a) / (2 * y1)
        x3 = s ** 2 - 2 * x1
        y3 = s * (x1 - x3) - y1
        return CurvePoint(x3, y3, self._a, self._b)

    def __sub__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self + -other


class Curve:
    """
    Curve holds the parameters of the curve y^2 = x^3 + a*x + b over GF(prime)
    and builds points on it.
    """

    __slots__ = ("_a", "_b")

    def __init__(self, a, b):
        _checkCurveParams(a, b)
        self._a = a
        self._b = b

    @staticmethod
    def fromInts(a, b, prime):
        """
        fromInts creates a curve from integer parameters.

        Args:
            a (int): the a parameter.
            b (int): the b parameter.
            prime (int): the field modulus.

        Returns:
            Curve: the curve.
        """
        return Curve(FieldElement(a, prime), FieldElement(b, prime))

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def prime(self):
        return self.a.prime

    def element(self, v):
        if isinstance(v, FieldElement):
            return v
        return FieldElement(v, self.prime)

    def point(self, x, y):
        """
        point creates a validated point on this curve.

        Args:
            x (int or FieldElement): the x coordinate.
            y (int or FieldElement): the y coordinate.

        Returns:
            CurvePoint: the point.

        Raises:
            NotOnCurveError: (x, y) is not on the curve.
        """
        return CurvePoint(self.element(x), self.element(y), self.a, self.b)

    def infinity(self):
        return CurvePoint.infinity(self.a, self.b)

    def contains(self, x, y):
        """
        contains is True if (x, y) satisfies the curve equation.
        """
        x, y = self.element(x), self.element(y)
        return y ** 2 == x ** 3 + self.a * x + self.b

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self):
        return hash((self.a, self.b))

    def __repr__(self):
        return f"Curve(a={self.a.num}, b={self.b.num}, prime={self.prime})"


# secp256k1 domain parameters, see [SEC2] section 2.4.1.
P = fromHex("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F")
Gx = fromHex("79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798")
Gy = fromHex("483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8")

secp256k1 = Curve.fromInts(0, 7, P)

# G is the secp256k1 base point.
G = secp256k1.point(Gx, Gy)

# The small curve y^2 = x^3 + 7 over GF(223), handy for working examples by
# hand.
curve223 = Curve.fromInts(0, 7, 223)
