# A plain Python submodule for Ed25519 math and signatures (RFC 8032)
# https://datatracker.ietf.org/doc/html/rfc8032

# Not constant time: scalar multiplication branches on the bits of secret
# scalars and point decoding branches on coordinate parity, so timing leaks
# information about secrets. Affine coordinates with a field inversion per
# point operation keep the formulas readable at the cost of speed.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are scalars (int), upper case are EdPoints.

from .ed import B, ZERO, EdPoint, decode_point, is_on_curve, point_add, point_double, recover_x, scalarmult
from .eddsa import check_valid, publickey, secret_expand, sign, verify
from .scalar import I, POW2, b, canonical, d, inv, l, mask, q
from .util import clamp, decode_int, encode_int, encode_point, getbit, hashint, shabytes
