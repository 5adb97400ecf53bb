from edsign.cli import keys, tty
from edsign.elliptic import publickey, sign


def main_sign(args):
  seed = keys.read_hex(keys.single(args.identities, "secret seed", "-i"), "secret seed", keys.SEED_SIZE)
  pk = None
  if args.recipients:
    pk = keys.read_hex(keys.single(args.recipients, "public key", "-r"), "public key", keys.PK_SIZE, last=True)
  message = keys.read_message(args.files)
  with tty.status("Signing... "):
    ownpk = publickey(seed)
    # A signature made with another key's pk would not verify under either
    if pk is not None and pk != ownpk:
      raise ValueError(f"Public key {pk.hex()} does not belong to the secret seed")
    signature = sign(message, seed, ownpk)
  print(signature.hex())
