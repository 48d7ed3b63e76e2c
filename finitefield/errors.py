class InversionError(ArithmeticError):
   """ A field element with no multiplicative inverse was inverted. """
   pass


class NoInverseError(InversionError):
   """ Raised by the exhaustive residue search in mod_inverse.

   Reaching this means the residue is zero or the modulus is not prime,
   i.e. the field parameters themselves are malformed.
   """
   pass


class ZeroInversionError(InversionError, ZeroDivisionError):
   """ Raised when the zero element of an extension field is inverted,
   for example by the group law dividing by a vertical tangent's slope.
   """
   pass
