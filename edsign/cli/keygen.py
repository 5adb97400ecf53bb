import sys
from secrets import token_bytes

from edsign.cli import keys, tty
from edsign.elliptic import publickey
from edsign.exceptions import CliArgError


def main_keygen(args):
  if args.files:
    raise CliArgError("keygen does not take any files")
  if len(args.identities) > 1:
    raise CliArgError("Only one secret seed may be specified")
  newseed = not args.identities
  if newseed:
    seed = token_bytes(keys.SEED_SIZE)
  else:
    seed = keys.read_hex(args.identities[0], "secret seed", keys.SEED_SIZE)
  with tty.status("Deriving public key... "):
    pk = publickey(seed)
  if newseed:
    print(seed.hex())
    sys.stderr.write(" 🔑  Secret seed on the first line, keep it safe\n")
  print(pk.hex())
