import os
import sys
from typing import Optional

from edsign.exceptions import CliArgError

SEED_SIZE = 32
PK_SIZE = 32


def read_hex(value: str, what: str, size: Optional[int] = None, last: bool = False) -> bytes:
  """
  Decode a hex string, or a word of a file if value names one.

  Keygen files hold the seed first and the public key last, so public keys
  are read with last=True.

  :raises CliArgError: on invalid hex or if the length does not match size
  """
  if os.path.isfile(value):
    with open(value) as f:
      words = f.read().split()
    if not words: raise CliArgError(f"No {what} found in {value}")
    value = words[-1] if last else words[0]
  try:
    data = bytes.fromhex(value)
  except ValueError:
    raise CliArgError(f"Invalid {what}: expected a hex string or a file containing one") from None
  if size is not None and len(data) != size:
    raise CliArgError(f"Invalid {what}: {len(data)} bytes given, {size} bytes required")
  return data

def single(values: list, what: str, flag: str) -> str:
  if not values: raise CliArgError(f"A {what} is required ({flag})")
  if len(values) > 1: raise CliArgError(f"Only one {what} may be specified")
  return values[0]

def read_message(files: list) -> bytes:
  """Read the named file, or stdin when no file or - is given"""
  if len(files) > 1: raise CliArgError("Only one file may be given")
  if not files or files[0] is True:
    return sys.stdin.buffer.read()
  try:
    with open(files[0], "rb") as f:
      return f.read()
  except FileNotFoundError:
    raise CliArgError(f"File not found: {files[0]}") from None
