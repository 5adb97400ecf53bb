from typing import Tuple

from ..exceptions import InvalidPublicKeyLength, InvalidSignatureLength
from .ed import B, decode_point, scalarmult
from .scalar import b, l
from .util import clamp, decode_int, encode_int, hashint, shabytes


def secret_expand(seed: bytes) -> Tuple[int, bytes]:
  """
  Hash the secret seed into the signing scalar and the nonce prefix.

  :returns: (a, prefix) where a is clamped and prefix is the upper half of the hash
  """
  h = shabytes(seed)
  return clamp(h), h[b // 8:b // 4]

def publickey(seed: bytes) -> bytes:
  """Standard Ed25519 public key of a secret seed"""
  a, _ = secret_expand(seed)
  return bytes(scalarmult(B, a))

def sign(message: bytes, seed: bytes, pk: bytes) -> bytes:
  """Standard Ed25519 signature (deterministic)"""
  a, prefix = secret_expand(seed)
  message, pk = bytes(message), bytes(pk)
  r = hashint(prefix + message)
  Rs = bytes(scalarmult(B, r))
  s = (r + hashint(Rs + pk + message) * a) % l
  return Rs + encode_int(s)

def verify(signature: bytes, message: bytes, pk: bytes) -> bool:
  """
  Standard Ed25519 signature verification.

  :returns: True if the signature matches, False otherwise
  :raises InvalidSignatureLength: if the signature is not 64 bytes
  :raises InvalidPublicKeyLength: if the public key is not 32 bytes
  :raises PointNotOnCurve: if R or the public key are not valid points
  """
  if len(signature) != b // 4:
    raise InvalidSignatureLength("Signature length is wrong")
  if len(pk) != b // 8:
    raise InvalidPublicKeyLength("Public key length is wrong")
  signature, message, pk = bytes(signature), bytes(message), bytes(pk)
  R = decode_point(signature[:b // 8])
  A = decode_point(pk)
  s = decode_int(signature[b // 8:])
  h = hashint(bytes(R) + pk + message)
  # Finally we confirm that (r + h * a) * B == R + h * A
  return scalarmult(B, s) == R + scalarmult(A, h)

def check_valid(signature: bytes, message: bytes, pk: bytes) -> None:
  """Verify a signature, raising ValueError on any failure"""
  if not verify(signature, message, pk):
    raise ValueError("Signature mismatch")
