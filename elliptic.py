#| # Elliptic curves over F(p^2)
#| Points carry no reference to their curve: the group law takes the
#| coefficient `a` of y^2 = x^3 + ax + b explicitly, and `b` only matters when
#| deciding whether a pair (x, y) lies on the curve at all.
#|
#| A point has exactly two shapes, an `AffinePoint` with both coordinates or
#| the `Ideal` point at infinity. There is no half-built state in between.


class EllipticCurve(object):
   def __init__(self, a, b):
      # assume we're already in the Weierstrass form
      self.a = a
      self.b = b

      self.discriminant = -16 * (4 * a*a*a + 27 * b * b)
      if not self.isSmooth():
         raise ValueError("The curve %s is not smooth!" % self)


   def isSmooth(self):
      return self.discriminant != 0


   def rightHandSide(self, x):
      return x*x*x + self.a * x + self.b


   def testPoint(self, x, y):
      return y*y == self.rightHandSide(x)


   def point(self, x, y):
      """ An affine point, checked against the curve equation. """
      if not self.testPoint(x, y):
         raise ValueError("The point (%s, %s) is not on the given curve %s!" % (x, y, self))
      return AffinePoint(x, y)


   def add(self, P, Q):
      return point_add(P, Q, self.a)


   def multiply(self, n, P):
      return point_mul(n, P, self.a)


   def __str__(self):
      return 'y^2 = x^3 + %sx + %s' % (self.a, self.b)


   def __repr__(self):
      return str(self)


   def __eq__(self, other):
      return (self.a, self.b) == (other.a, other.b)


   def __hash__(self):
      return hash((self.a, self.b))



class Point(object):
   isIdeal = False


class AffinePoint(Point):
   def __init__(self, x, y):
      if x is None or y is None:
         raise ValueError("An affine point needs both coordinates, got (%r, %r)" % (x, y))

      self.x = x
      self.y = y


   def __str__(self):
      return "(%s, %s)" % (self.x, self.y)


   def __repr__(self):
      return "AffinePoint(%r, %r)" % (self.x, self.y)


   def __neg__(self):
      return AffinePoint(self.x, -self.y)


   def __eq__(self, other):
      if not isinstance(other, AffinePoint):
         return False

      return (self.x, self.y) == (other.x, other.y)


   def __hash__(self):
      return hash((self.x, self.y))


class Ideal(Point):
   isIdeal = True

   def __neg__(self):
      return self

   def __str__(self):
      return "Point at infinity"

   def __repr__(self):
      return "Ideal()"

   def __eq__(self, other):
      return type(other) is Ideal

   def __hash__(self):
      return hash(Ideal)


def point_add(P, Q, a):
   """
   Chord-and-tangent addition on y^2 = x^3 + ax + b.

   Doubling a point with y = 0 divides by zero and raises
   ZeroInversionError, which callers may catch.
   """
   if P.isIdeal:
      return Q
   if Q.isIdeal:
      return P

   x_1, y_1, x_2, y_2 = P.x, P.y, Q.x, Q.y

   # must come before either slope is formed
   if x_1 == x_2 and y_1 != y_2:
      assert y_1 == -y_2, "%s and %s share x but are not negatives" % (P, Q)
      return Ideal()

   if x_1 == x_2:
      # slope of the tangent line
      m = (3 * x_1 * x_1 + a) / (2 * y_1)
   else:
      # slope of the secant line
      m = (y_2 - y_1) / (x_2 - x_1)

   x_3 = m*m - x_1 - x_2
   y_3 = m*(x_1 - x_3) - y_1

   return AffinePoint(x_3, y_3)


def point_mul(n, P, a):
   """ n * P by double-and-add, reading the bits of n from least significant up. """
   if not isinstance(n, int):
      raise TypeError("Can't scale a point by something which isn't an int!")
   if n < 0:
      return point_mul(-n, -P, a)

   result = Ideal()
   base = P

   while n > 0:
      if n & 1 == 1:
         result = point_add(result, base, a)

      n >>= 1
      if n > 0:
         base = point_add(base, base, a)

   return result


__all__ = [
   'EllipticCurve', 'Point', 'AffinePoint', 'Ideal',
   'point_add', 'point_mul',
]
