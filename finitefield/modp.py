from .errors import NoInverseError
from .numbertype import *

# so all IntegersModP are instances of the same base class
class _Modular(FieldElement):
    pass


def isPrime(n):
    # trial division is plenty for the characteristics used here
    if n < 2:
        return False
    return all(n % d for d in range(2, int(n ** 0.5) + 1))


def mod_inverse(x, p):
    """
    Find the inverse of the residue x modulo p by trying every candidate
    in [1, p). The fields here are tiny, so the search is the whole story.
    """
    x = x % p
    for i in range(1, p):
        if (x * i) % p == 1:
            return i

    raise NoInverseError("No modular inverse of %d mod %d found!" % (x, p))


@memoize
def IntegersModP(p):
    # assume p is prime

    class IntegerModP(_Modular):
        def __init__(self, n):
            try:
                self.n = int(n) % IntegerModP.p
            except (TypeError, ValueError):
                raise TypeError(
                    "Can't cast type %s to %s in __init__"
                    % (type(n).__name__, type(self).__name__)
                )

            self.field = IntegerModP

        @typecheck
        def __add__(self, other):
            return IntegerModP(self.n + other.n)

        @typecheck
        def __sub__(self, other):
            return IntegerModP(self.n - other.n)

        @typecheck
        def __mul__(self, other):
            return IntegerModP(self.n * other.n)

        def __neg__(self):
            return IntegerModP(-self.n)

        @typecheck
        def __eq__(self, other):
            return isinstance(other, IntegerModP) and self.n == other.n

        def inverse(self):
            # raises NoInverseError on zero, or when p turns out not to be prime
            return IntegerModP(mod_inverse(self.n, self.p))

        def isSquare(self):
            return any((i * i - self.n) % self.p == 0 for i in range(self.p))

        def __str__(self):
            return str(self.n)

        def __repr__(self):
            return "%d (mod %d)" % (self.n, self.p)

        def __int__(self):
            return self.n

        def __hash__(self):
            return hash((self.n, self.p))

        @classmethod
        def elements(cls):
            return [cls(n) for n in range(cls.p)]


    IntegerModP.p = p
    IntegerModP.__name__ = 'Z/%d' % (p)
    IntegerModP.englishName = 'IntegersMod%d' % (p)
    return IntegerModP


def smallestNonResidue(p):
    """
    The least k in [1, p) that is not a square mod p, so that t^2 - k is
    irreducible over Z/p.
    """
    Zp = IntegersModP(p)
    for k in range(1, p):
        if not Zp(k).isSquare():
            return k
    raise ValueError("Every residue mod %d is a square; no quadratic extension" % p)


if __name__ == "__main__":
    mod5 = IntegersModP(5)
    print([str(x.inverse()) for x in mod5.elements()[1:]])
