#| # Quadratic extension fields F(p^2)
#| An element is a pair of residues (a, b) standing for a + b t, where t is a
#| root of the irreducible polynomial t^2 - k over Z/p. Because the degree is
#| fixed at two, every operation has a closed form and no polynomial
#| division is needed:
#|
#|  - (a + bt)(c + dt) = (ac + k bd) + (ad + bc) t
#|  - N(a + bt) = a^2 - k b^2, a residue that vanishes only at zero
#|  - (a + bt)^-1 = (a - bt) / N(a + bt)
#|
#| The reference instance is F(5^2) built from t^2 + 2 = 0, i.e. t^2 = 3.

from .errors import ZeroInversionError
from .modp import IntegersModP, isPrime, smallestNonResidue
from .numbertype import FieldElement, memoize, typecheck


# so all quadratic extension elements share a base class
class _Quadratic(FieldElement):
    operatorPrecedence = 2


def QuadraticExtension(p, k=None):
    """
    Build F(p^2) as Z/p[t] / (t^2 - k).

    args:
       p   an odd prime
       k   a non-residue mod p; when omitted the least one is chosen
    """
    if not isPrime(p):
        raise ValueError("%d is not prime" % p)
    if k is None:
        k = smallestNonResidue(p)
    if IntegersModP(p)(k).isSquare():
        raise ValueError("t^2 - %d is reducible mod %d" % (k % p, p))

    return _quadraticExtension(p, k % p)


@memoize
def _quadraticExtension(p, k):
    Zp = IntegersModP(p)

    class QuadraticElement(_Quadratic):
        def __init__(self, a, b=0):
            if isinstance(a, QuadraticElement):
                a, b = a.a, a.b
            try:
                self.a = int(a) % p
                self.b = int(b) % p
            except (TypeError, ValueError):
                raise TypeError(
                    "Can't cast type %s to %s in __init__"
                    % (type(a).__name__, type(self).__name__)
                )

            self.field = QuadraticElement

        @typecheck
        def __add__(self, other):
            return QuadraticElement(self.a + other.a, self.b + other.b)

        @typecheck
        def __sub__(self, other):
            return QuadraticElement(self.a - other.a, self.b - other.b)

        @typecheck
        def __mul__(self, other):
            a, b, c, d = self.a, self.b, other.a, other.b
            return QuadraticElement(a * c + k * b * d, a * d + b * c)

        def __neg__(self):
            return QuadraticElement(-self.a, -self.b)

        def __pow__(self, n):
            result = QuadraticElement(1)
            for _ in range(n):
                result = result * self
            return result

        @typecheck
        def __eq__(self, other):
            return (self.a, self.b) == (other.a, other.b)

        def __hash__(self):
            return hash((self.a, self.b, p, k))

        def isZero(self):
            return self.a == 0 and self.b == 0

        def conjugate(self):
            return QuadraticElement(self.a, -self.b)

        def norm(self):
            return Zp(self.a * self.a - k * self.b * self.b)

        def inverse(self):
            n = self.norm()
            if n == 0:
                raise ZeroInversionError("Can't invert the zero element of %s" % QuadraticElement.__name__)

            nInverse = n.inverse().n
            return QuadraticElement(self.a * nInverse, -self.b * nInverse)

        def __str__(self):
            if self.a == 0 and self.b == 0:
                return "0"
            if self.b == 0:
                return "%d" % self.a
            if self.a == 0:
                return "%dt" % self.b
            return "%d + %dt" % (self.a, self.b)

        def __repr__(self):
            return "%s (in %s)" % (self, QuadraticElement.__name__)

        @classmethod
        def elements(cls):
            """ Every element, ordered by the 1-coefficient then the t-coefficient. """
            for a in range(p):
                for b in range(p):
                    yield cls(a, b)

        @classmethod
        def zero(cls):
            return cls(0)

        @classmethod
        def one(cls):
            return cls(1)


    QuadraticElement.p = p
    QuadraticElement.k = k
    QuadraticElement.order = p * p
    QuadraticElement.primeSubfield = Zp
    QuadraticElement.__name__ = 'F_{%d^2}' % (p)
    QuadraticElement.englishName = 'QuadraticExtensionOf%dBy%d' % (p, k)
    return QuadraticElement


F25 = QuadraticExtension(5, 3)
