from __future__ import annotations

from typing import Iterator

from ..exceptions import PointNotOnCurve
from .scalar import I, b, canonical, d, inv, q, qp3
from .util import decode_int, encode_point, getbit

# Points are affine (x, y) with both coordinates reduced mod q. Every add
# and double pays for two field inversions, which keeps the formulas plain.


class EdPoint:
  """A point (x, y) on Ed25519"""
  __slots__ = ("x", "y")

  def __init__(self, x: int, y: int):
    self.x = x
    self.y = y

  @staticmethod
  def from_bytes(s: bytes) -> EdPoint:
    """Read a compressed point, see decode_point"""
    return decode_point(s)

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return encode_point(self.x, self.y)
  def __hash__(self): return hash((self.x, self.y))

  def __iter__(self) -> Iterator[int]:
    yield self.x
    yield self.y

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    return self.x == othr.x and self.y == othr.y

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    return point_add(self, othr)

  def __mul__(self, s: int) -> EdPoint:
    if not isinstance(s, int): return NotImplemented
    return scalarmult(self, s)

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  @property
  def on_curve(self) -> bool:
    return is_on_curve(self.x, self.y)


def recover_x(y: int) -> int:
  """
  Find the even x coordinate of the point with the given y.

  :raises PointNotOnCurve: if no such point exists
  """
  y2 = y * y
  xx = canonical((y2 - 1) * inv(d * y2 + 1))
  # Note that q is congruent to 5 modulo 8, so (q+3)/8 is an integer
  x = pow(xx, qp3 // 8, q)
  if canonical(x * x - xx) != 0:
    x = x * I % q
  if canonical(x * x - xx) != 0:
    raise PointNotOnCurve("Not a curve point on Ed25519")
  if x & 1:
    x = q - x
  return x

def is_on_curve(x: int, y: int) -> bool:
  xx, yy = x * x, y * y
  return canonical(yy - xx - d * xx * yy - 1) == 0

def point_add(P: EdPoint, Q: EdPoint) -> EdPoint:
  """Twisted Edwards addition"""
  x1, y1 = P
  x2, y2 = Q
  xx12 = x1 * x2
  yy12 = y1 * y2
  dtemp = d * xx12 * yy12
  x3 = (x1 * y2 + x2 * y1) * inv(1 + dtemp)
  y3 = (yy12 + xx12) * inv(1 - dtemp)
  return EdPoint(canonical(x3), canonical(y3))

def point_double(P: EdPoint) -> EdPoint:
  """Addition of P to itself, sharing the products of x and y"""
  x, y = P
  xx = x * x
  yy = y * y
  dtemp = d * xx * yy
  x3 = 2 * x * y * inv(1 + dtemp)
  y3 = (yy + xx) * inv(1 - dtemp)
  return EdPoint(canonical(x3), canonical(y3))

def scalarmult(P: EdPoint, e: int) -> EdPoint:
  """
  Multiply the point by a scalar (double-and-add from the top bit down).

  Not constant time: the work done depends on the bits of e.
  """
  if e < 0: raise ValueError("Scalar must not be negative")
  Q = ZERO
  for i in reversed(range(e.bit_length())):
    Q = point_double(Q)
    if e >> i & 1:
      Q = point_add(Q, P)
  return Q

def decode_point(s: bytes) -> EdPoint:
  """
  Read a compressed point and check that it is on the curve.

  :raises PointNotOnCurve: if the bytes are not a valid point
  """
  if len(s) != b // 8: raise ValueError("Should be exactly 32 bytes")
  y = decode_int(s)
  x = recover_x(y)
  if x & 1 != getbit(s, b - 1):
    x = q - x
  if not is_on_curve(x, y):
    raise PointNotOnCurve("Decoding point that is not on curve")
  return EdPoint(x, y)


# Neutral element
ZERO = EdPoint(0, 1)

# Base point (prime group generator), y = 4/5 with even x
By = canonical(4 * inv(5))
B = EdPoint(canonical(recover_x(By)), By)


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  return f"EdPoint({P.x}, {P.y})"
