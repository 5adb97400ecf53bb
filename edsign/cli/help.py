import sys
from typing import NoReturn

import edsign

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}edsign {F}keygen {D}[{F}-i {N}seed{D}] —{N} create a new key pair, or the public key of a seed\n",
  sign=f"{C}edsign {F}sign -i {N}seed {D}[{F}-r {N}pubkey{D}] [{N}file{D}]{N}\n",
  verify=f"{C}edsign {F}verify -r {N}pubkey {F}-s {N}signature {D}[{N}file{D}]{N}\n",
  bench=f"{C}edsign {F}bench {D}[{F}-n {N}rounds{D}] —{N} time key derivation, signing and verification\n",
)

usagetext = dict(
  keygen=f"""\
Without options a random 32-byte secret seed is created. The seed is printed
on the first line and its public key on the second. With {F}-i{N} only the
public key of the given seed is printed.

  {F}-i {N}seed           Secret seed (64 hex digits or a file containing them)
""",
  sign=f"""\
Sign a file, or stdin when no file or {F}-{N} is given. The 64-byte signature is
printed in hex. Signatures are deterministic: the same seed and message always
give the same signature.

  {F}-i {N}seed           Secret seed (hex or file)
  {F}-r {N}pubkey         Public key of the seed, checked to match (derived if omitted)
""",
  verify=f"""\
Verify the signature of a file, or of stdin when no file or {F}-{N} is given.
Exits with status 0 on a valid signature and 10 otherwise.

  {F}-r {N}pubkey         Public key of the signer (hex, or the last line of a file,
                      so that keygen output files work too)
  {F}-s {N}signature      Signature (hex or file)
""",
  bench=f"""\
  {F}-n {N}rounds         Number of operations of each kind (default 10)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"""\
{T}{f"Edsign {edsign.__version__} - Ed25519 signatures in plain Python":78}{N}
 ⚠️  Not constant time, do not use where timing can be observed by others
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Keys and signatures are given as hex strings or as files holding the hex.

  {F}--debug{N}           Show tracebacks of errors
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

  {C}edsign {F}keygen {C}>{N} alice.key                     {D}(seed and public key lines){N}
  {C}edsign {F}sign -i {N}alice.key message.txt {C}>{N} message.sig
  {C}edsign {F}verify -r {N}alice.key {F}-s {N}message.sig message.txt   {D}(or -r with the public key hex){N}
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Edsign {edsign.__version__}")
  sys.exit(0)
