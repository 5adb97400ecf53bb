from secrets import token_bytes
from time import perf_counter

from edsign.elliptic import publickey, sign, verify
from edsign.exceptions import CliArgError


def main_bench(args):
  try:
    rounds = int(args.rounds)
  except ValueError:
    raise CliArgError(f"Invalid number of rounds {args.rounds!r}") from None
  if rounds < 1:
    raise CliArgError("At least one round is required")

  seeds = [token_bytes(32) for i in range(rounds)]
  message = token_bytes(64)

  print("KEYGEN", end="", flush=True)
  t0 = perf_counter()
  pks = [publickey(seed) for seed in seeds]
  keytime = perf_counter() - t0
  print(f"{keytime / rounds * 1e3:8.1f} ms", end="", flush=True)

  print("  ➤   SIGN", end="", flush=True)
  t0 = perf_counter()
  sigs = [sign(message, seed, pk) for seed, pk in zip(seeds, pks)]
  signtime = perf_counter() - t0
  print(f"{signtime / rounds * 1e3:8.1f} ms", end="", flush=True)

  print("  ➤   VERIFY", end="", flush=True)
  t0 = perf_counter()
  valid = [verify(sig, message, pk) for sig, pk in zip(sigs, pks)]
  verifytime = perf_counter() - t0
  print(f"{verifytime / rounds * 1e3:8.1f} ms")

  if not all(valid):
    raise ValueError("Benchmark produced an invalid signature")
  print(f"Ran {rounds} rounds of each operation, average time per operation shown.")
