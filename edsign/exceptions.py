class SignatureError(ValueError):
  """Signature or key input is malformed"""

class InvalidSignatureLength(SignatureError):
  """Signature is not exactly 64 bytes"""

class InvalidPublicKeyLength(SignatureError):
  """Public key is not exactly 32 bytes"""

class PointNotOnCurve(SignatureError):
  """Bytes do not decode to a point on Ed25519"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
