import sys
from io import BytesIO, TextIOWrapper

import pytest

import edsign
from edsign.cli.__main__ import main
from edsign.cli.args import argparse

seed = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
pk = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
sig = (
  "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
  "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_argparser(capsys):
  # Correct but complex arguments
  sys.argv = f"edsign sign --seed {seed} -r {pk} -- --notaflag".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.identities == [seed]
  assert a.recipients == [pk]
  assert a.files == ["--notaflag"]
  assert not a.debug
  # Should produce no output
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Giving mode within combined arguments
  sys.argv = f"edsign -ki {seed}".split()
  a = argparse()
  assert a.mode == "keygen"
  assert a.identities == [seed]

  # Stdin marker and options
  sys.argv = "edsign verify -r pk -s sig - --debug".split()
  a = argparse()
  assert a.files == [True]
  assert a.signatures == ["sig"]
  assert a.debug is True

  sys.argv = "edsign bench -n 3".split()
  assert argparse().rounds == "3"

  # Missing argument parameter
  sys.argv = "edsign sign -i".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing: edsign sign -i …" in cap.err

  # Flag of another mode
  sys.argv = "edsign keygen -s sig".split()
  with pytest.raises(SystemExit):
    argparse()
  assert "Unknown argument: edsign keygen -s" in capsys.readouterr().err

  # Invalid mode
  sys.argv = "edsign frobnicate".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  assert "Invalid or missing command" in capsys.readouterr().err


## End-to-End testing: Running edsign as if it was ran from command line

# A fixture to run edsign more easily, checks exitcode and returns its output
@pytest.fixture
def edsign_cli(monkeypatch, capsys):
  def run_main(*args, stdin=b"", exitcode=0):
    sys.argv = [str(arg) for arg in ("edsign", *args)]
    monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(stdin)))  # Inject stdin
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but edsign did sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


def test_help(edsign_cli):
  cap = edsign_cli()
  assert "keygen" in cap.out
  cap = edsign_cli("help", "sign")
  assert "Signatures are deterministic" in cap.out
  cap = edsign_cli("verify", "--help")
  assert "Exits with status 0" in cap.out
  cap = edsign_cli("--version")
  assert cap.out == f"Edsign {edsign.__version__}\n"


def test_keygen(edsign_cli, tmp_path):
  cap = edsign_cli("keygen", "-i", seed)
  assert cap.out == f"{pk}\n"

  # Seed read from a file
  keyfile = tmp_path / "alice.key"
  keyfile.write_text(f"{seed}\n")
  cap = edsign_cli("keygen", "-i", keyfile)
  assert cap.out == f"{pk}\n"

  # New random key
  cap = edsign_cli("keygen")
  newseed, newpk = cap.out.split()
  assert len(bytes.fromhex(newseed)) == 32
  assert edsign.publickey(bytes.fromhex(newseed)).hex() == newpk
  assert "keep it safe" in cap.err

  cap = edsign_cli("keygen", "-i", "00ff", exitcode=1)
  assert "2 bytes given, 32 bytes required" in cap.err
  cap = edsign_cli("keygen", "-i", "not hex", exitcode=1)
  assert "Invalid secret seed" in cap.err


def test_sign_and_verify(edsign_cli, tmp_path):
  msgfile = tmp_path / "message.txt"
  msgfile.write_bytes(b"")

  # Public key derived from seed, message from file
  cap = edsign_cli("sign", "-i", seed, msgfile)
  assert cap.out == f"{sig}\n"
  # Public key given, message from stdin
  cap = edsign_cli("sign", "-i", seed, "-r", pk, "-")
  assert cap.out == f"{sig}\n"

  cap = edsign_cli("verify", "-r", pk, "-s", sig, msgfile)
  assert not cap.out
  assert "Signature valid" in cap.err

  # Signature read from a file, message from stdin
  sigfile = tmp_path / "message.sig"
  sigfile.write_text(sig)
  cap = edsign_cli("verify", "-r", pk, "-s", sigfile)
  assert "Signature valid" in cap.err

  # Keygen output file works directly as the seed
  keyfile = tmp_path / "bob.key"
  cap = edsign_cli("keygen")
  keyfile.write_text(cap.out)
  bobpk = cap.out.split()[1]
  cap = edsign_cli("sign", "-i", keyfile, stdin=b"hello")
  bobsig = cap.out.strip()
  edsign_cli("verify", "-r", bobpk, "-s", bobsig, stdin=b"hello")


def test_keyfile_as_pubkey(edsign_cli, tmp_path):
  # The keygen output file holds the seed first and the public key last
  keyfile = tmp_path / "alice.key"
  keyfile.write_text(f"{seed}\n{pk}\n")
  cap = edsign_cli("sign", "-i", keyfile, "-r", keyfile)
  assert cap.out == f"{sig}\n"
  cap = edsign_cli("verify", "-r", keyfile, "-s", sig)
  assert "Signature valid" in cap.err

  # A file holding only the public key
  pkfile = tmp_path / "alice.pub"
  pkfile.write_text(f"{pk}\n")
  cap = edsign_cli("verify", "-r", pkfile, "-s", sig)
  assert f"signed by {pk}" in cap.err


def test_sign_pubkey_checks(edsign_cli):
  cap = edsign_cli("sign", "-i", seed, "-r", "00ff", exitcode=1)
  assert not cap.out
  assert "Invalid public key: 2 bytes given, 32 bytes required" in cap.err

  # Public key of another seed
  otherpk = edsign.publickey(bytes(32)).hex()
  cap = edsign_cli("sign", "-i", seed, "-r", otherpk, exitcode=10)
  assert not cap.out
  assert "does not belong to the secret seed" in cap.err


def test_verify_failures(edsign_cli, tmp_path, monkeypatch):
  cap = edsign_cli("verify", "-r", pk, "-s", sig, stdin=b"tampered", exitcode=10)
  assert "Error: Signature mismatch" in cap.err

  cap = edsign_cli("verify", "-r", pk, "-s", sig[:-2], exitcode=10)
  assert "Signature length is wrong" in cap.err

  cap = edsign_cli("verify", "-r", pk[:-2], "-s", sig, exitcode=10)
  assert "Public key length is wrong" in cap.err

  cap = edsign_cli("verify", "-s", sig, exitcode=1)
  assert "A public key is required (-r)" in cap.err

  cap = edsign_cli("verify", "-r", pk, "-s", sig, tmp_path / "missing.txt", exitcode=1)
  assert "File not found" in cap.err

  # With --debug errors are not caught
  sys.argv = ["edsign", "verify", "-r", pk, "-s", sig, "--debug"]
  monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(b"tampered")))
  with pytest.raises(ValueError) as exc:
    main()
  assert "Signature mismatch" == str(exc.value)


def test_bench(edsign_cli):
  cap = edsign_cli("bench", "-n", "1")
  assert "VERIFY" in cap.out
  assert "Ran 1 rounds" in cap.out
  edsign_cli("bench", "-n", "zero", exitcode=1)
