#| # Brute-force point search over F(p^2)
#| The fields involved are small enough to scan completely, so curve points
#| are found by trying every (x, y) pair rather than by taking square roots.

# Use numpy to provide element-wise operations and fancy indexing
import numpy as np

from finitefield.errors import InversionError
from finitefield.quadratic import F25, QuadraticExtension
from elliptic import AffinePoint, EllipticCurve, Ideal, point_mul


def enumerate_field_elements(p, k=None):
   """
   All p^2 elements a + bt of F(p^2), a in the outer loop and b in the inner.
   The order depends only on p; k picks the multiplication rule.
   """
   return list(QuadraticExtension(p, k).elements())


def enumerate_curve_points(a, b, field_elements):
   """
   Every affine (x, y) with y^2 = x^3 + ax + b, x and y drawn from
   field_elements. Points come out in search order: x outer, y inner.
   """
   ys = np.array(field_elements, dtype=object)
   squares = ys * ys

   points = []
   for x in field_elements:
      rhs = x*x*x + a*x + b
      points.extend(AffinePoint(x, y) for y in ys[squares == rhs])

   return points


def find_full_r_torsion_points(r, a, b, field_elements):
   """
   args:
      r                the torsion order
      a, b             curve coefficients
      field_elements   the search domain, usually enumerate_field_elements(p)
   returns:
      every affine P on the curve with r*P at infinity, in search order,
      followed by the point at infinity

   A point whose multiplication chain doubles a y = 0 point raises an
   InversionError inside point_mul; it is skipped rather than reported.
   """
   torsionPoints = []
   for P in enumerate_curve_points(a, b, field_elements):
      try:
         rP = point_mul(r, P, a)
      except InversionError:
         continue

      if rP.isIdeal:
         torsionPoints.append(P)

   torsionPoints.append(Ideal())
   return torsionPoints


# The curve y^2 = x^3 + x + 1 over F(5^2), and the torsion order to report
A = F25(1)
B = F25(1)
R = 3


def main(r=R):
   fieldElements = enumerate_field_elements(F25.p, F25.k)
   curve = EllipticCurve(a=A, b=B)

   print("Elements of F(%d^2):" % F25.p)
   for element in fieldElements:
      print(element)

   print("\nPoints on the elliptic curve %s:" % curve)
   for point in enumerate_curve_points(curve.a, curve.b, fieldElements):
      print(point)

   print("\nFull %d-torsion points on the curve:" % r)
   for point in find_full_r_torsion_points(r, curve.a, curve.b, fieldElements):
      print(point)


if __name__ == "__main__":
   main()
