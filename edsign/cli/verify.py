import sys

from edsign.cli import keys, tty
from edsign.elliptic import check_valid


def main_verify(args):
  # Lengths are checked by the verification itself
  pk = keys.read_hex(keys.single(args.recipients, "public key", "-r"), "public key", last=True)
  signature = keys.read_hex(keys.single(args.signatures, "signature", "-s"), "signature")
  message = keys.read_message(args.files)
  with tty.status("Verifying... "):
    check_valid(signature, message, pk)
  sys.stderr.write(f" ✅  Signature valid, signed by {pk.hex()}\n")
