# Bit length of encoded field elements, scalars are clamped to b - 1 bits
b = 256

# Field prime
q = 2**255 - 19

# Precalculate commonly needed parts of the prime
qm2 = q - 2
qp3 = q + 3

# Group order of the prime subgroup generated by B
l = 2**252 + 27742317777372353535851937790883648493

# Encoded integers have 255 bits, the top bit of a point is the sign of x
mask = (1 << 255) - 1

# Powers of two for rebuilding integers from hash bits, one per digest bit
POW2 = tuple(1 << i for i in range(2 * b))


def canonical(value: int, modulus: int = q) -> int:
  """Reduce value into [0, modulus), also for negative values"""
  # Python's % follows the sign of the divisor, so a positive modulus is enough
  return value % modulus

def inv(x: int) -> int:
  """Inverse mod q by Fermat's little theorem. Zero maps to zero."""
  return pow(x, qm2, q)


# Twisted Edwards curve: -x2 + y2 = 1 + d x2 y2
d = canonical(-121665 * inv(121666))

# Square root of -1, used to pick the other square root in recover_x
I = pow(2, (q - 1) // 4, q)
