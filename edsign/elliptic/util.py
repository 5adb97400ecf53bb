import hashlib

from .scalar import POW2, b, mask


def getbit(h: bytes, i: int) -> int:
  """Bit i of a little endian byte string"""
  return h[i // 8] >> (i % 8) & 1

def encode_int(n: int) -> bytes:
  """Little endian bytes, zero padded to at least 32 bytes"""
  return n.to_bytes(max(b // 8, (n.bit_length() + 7) // 8), "little")

def decode_int(s: bytes) -> int:
  """Little endian integer of the low 255 bits"""
  return int.from_bytes(s, "little") & mask

def encode_point(x: int, y: int) -> bytes:
  """Compressed point: y with the parity of x on the high bit of the last byte"""
  s = bytearray(encode_int(y))
  s[-1] |= (x & 1) << 7
  return bytes(s)


def shabytes(m) -> bytes:
  return hashlib.sha512(m).digest()

def hashint(m) -> int:
  """Return SHA-512 of m as a 512 bit integer"""
  # Built bit by bit (bit i is bit i % 8 of byte i // 8) to stay in step with
  # other implementations of the scheme
  h = shabytes(m)
  return sum(POW2[i] for i in range(2 * b) if getbit(h, i))

def clamp(h: bytes) -> int:
  """Ed25519 standard clamping of a hashed secret key into a scalar"""
  # 256 bits 01[x]000 using bits 3..253 of h
  return POW2[b - 2] + sum(POW2[i] for i in range(3, b - 2) if getbit(h, i))
