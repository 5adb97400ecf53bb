"""Ed25519 signatures (RFC 8032) in plain Python"""

from edsign.elliptic.eddsa import check_valid, publickey, sign, verify
from edsign.exceptions import InvalidPublicKeyLength, InvalidSignatureLength, PointNotOnCurve, SignatureError

__version__ = "0.1.0"
