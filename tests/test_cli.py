import sys
from io import BytesIO, TextIOWrapper

import pytest

import suite25519
from suite25519 import AuthenticationFailedError
from suite25519.cli.__main__ import main
from suite25519.cli.args import argparse


def test_argparser(capsys):
  # Correct but complex arguments
  sys.argv = "suite25519 sign -mPi seckey --armor -o out.dat message.txt".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.seckeys == ["seckey"]
  assert a.include_message is True
  assert a.include_pubkey is True
  assert a.armor is True
  assert a.outfile == ["out.dat"]
  assert a.files == ["message.txt"]
  # Should produce no output
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Missing argument parameter
  sys.argv = "suite25519 enc -A -r".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing: suite25519 enc -r …" in cap.err

  # Flags of other modes are not accepted
  sys.argv = "suite25519 verify -m".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert "Unknown argument: suite25519 verify -m" in cap.err

  # Giving mode within combined arguments
  sys.argv = "suite25519 -eAr pubkey message.txt".split()
  a = argparse()
  assert a.mode == "enc"
  assert a.paste is True
  assert a.pubkeys == ["pubkey"]
  assert a.files == ["message.txt"]
  sys.argv = "suite25519 -smPi seckey".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.include_message is True
  assert a.include_pubkey is True
  assert a.seckeys == ["seckey"]
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Stdin and double-hyphen file separator
  sys.argv = "suite25519 dec - -- --debug -i".split()
  args = argparse()
  assert args.files == [True, "--debug", "-i"]
  assert not args.debug


## End-to-End testing: Running suite25519 as if it was ran from command line


# A fixture to run main more easily, checks exitcode and returns its output
@pytest.fixture
def suite(monkeypatch, capsys):
  def run_main(*args, stdin="", exitcode=0):
    sys.argv = [str(arg) for arg in ("suite25519", *args)]
    monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(stdin.encode())))  # Inject stdin
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but got sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


@pytest.fixture
def keys(suite, tmp_path):
  """Keyfiles for alice and bob, returns (alice.key, alice.pub, bob.key, bob.pub)."""
  files = []
  for name in "alice", "bob":
    sk = tmp_path / f"{name}.key"
    pk = tmp_path / f"{name}.pub"
    cap = suite("keygen", "-o", sk)
    assert "Public key" in cap.err
    cap = suite("pubkey", "-i", sk)
    pk.write_text(cap.out)
    files += [sk, pk]
  return files


def test_help_and_version(suite):
  cap = suite("--help")
  assert "keygen" in cap.out
  cap = suite("help", "enc")
  assert "--anonymous" in cap.out
  cap = suite("--version")
  assert suite25519.__version__ in cap.out
  cap = suite("frobnicate", exitcode=1)
  assert "Invalid or missing command" in cap.err


def test_keygen(suite, tmp_path):
  cap = suite("keygen")
  sk = suite25519.SigningPrivateKey.import_base64(cap.out)
  assert sk.public_key.export_base64() in cap.err

  fn = tmp_path / "secret.key"
  suite("keygen", "-o", fn)
  assert len(suite25519.SigningPrivateKey.import_base64(fn.read_text()).data) == 32
  # Never overwrite a key
  cap = suite("keygen", "-o", fn, exitcode=10)
  assert "already exists" in cap.err


def test_pubkey(suite, tmp_path):
  sk = suite25519.generate_key()
  cap = suite("pubkey", "-i", sk.export_base64())
  assert cap.out == f"{sk.public_key.export_base64()}\n"
  assert sk.public_key.id in cap.err

  cap = suite("pubkey", "-i", "not-a-key", exitcode=10)
  assert "Unrecognized secret key" in cap.err
  # Exactly one key is needed
  cap = suite("pubkey", exitcode=1)
  assert "Exactly one secret key" in cap.err


def test_sign_and_verify(suite, keys, tmp_path):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  cap = suite("sign", "-mP", "-i", alice_sk, stdin="Hello, World!")
  signed = cap.out
  cap = suite("verify", "-r", alice_pk, stdin=signed)
  assert cap.out == "Hello, World!\n"
  assert "Signed by" in cap.err

  # Binary file output and input
  msgfile = tmp_path / "message.txt"
  msgfile.write_text("From a file\n")
  signedfile = tmp_path / "signed.dat"
  suite("sign", "-m", "-i", alice_sk, "-o", signedfile, msgfile)
  outfile = tmp_path / "verified.txt"
  suite("verify", "-r", alice_pk, "-o", outfile, signedfile)
  assert outfile.read_text() == "From a file\n"

  # Wrong signer
  cap = suite("verify", "-r", bob_pk, stdin=signed, exitcode=10)
  assert "Error:" in cap.err
  assert not cap.out


def test_sign_without_message(suite, keys):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  cap = suite("sign", "-i", alice_sk, stdin="Hello")
  assert "Message not included" in cap.err
  cap = suite("verify", "-r", alice_pk, stdin=cap.out, exitcode=10)
  assert "No message included" in cap.err


def test_encrypt_and_decrypt(suite, keys):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  cap = suite("enc", "-r", bob_pk, stdin="Secret Message")
  cap = suite("dec", "-i", bob_sk, stdin=cap.out)
  assert cap.out == "Secret Message\n"

  cap = suite("enc", "-r", bob_pk, stdin="Secret Message")
  cap = suite("dec", "-i", alice_sk, stdin=cap.out, exitcode=10)
  assert "Decryption failed" in cap.err
  assert not cap.out


def test_sign_encrypt_and_decrypt_verify(suite, keys, tmp_path):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  fn = tmp_path / "cipher.txt"
  suite("enc", "-i", alice_sk, "-r", bob_pk, "-ao", fn, stdin="Hello, Bob!")
  assert fn.read_text().isascii()
  cap = suite("dec", "-i", bob_sk, "-r", alice_pk, fn)
  assert cap.out == "Hello, Bob!\n"
  assert "Signed by" in cap.err

  # Signed by somebody else than expected
  cap = suite("dec", "-i", bob_sk, "-r", bob_pk, fn, exitcode=10)
  assert "different public key" in cap.err
  assert not cap.out

  # Anonymous sender can still be verified by the signature
  cap = suite("enc", "--anonymous", "-i", alice_sk, "-r", bob_pk, stdin="Hello again")
  cap = suite("dec", "-i", bob_sk, "-r", alice_pk, stdin=cap.out)
  assert cap.out == "Hello again\n"

  cap = suite("enc", "--anonymous", "-r", bob_pk, stdin="Hello", exitcode=1)
  assert "--anonymous" in cap.err


def test_paste(suite, keys, mocker):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  copy = mocker.patch("pyperclip.copy")
  cap = suite("enc", "-A", "-r", bob_pk, stdin="Secret Message")
  assert not cap.out
  assert "clipboard" in cap.err
  copy.assert_called_once()
  armored = copy.call_args[0][0]
  assert suite25519.decrypt(suite25519.util.armor_decode(armored), suite25519.SigningPrivateKey.import_base64(bob_sk.read_text())) == b"Secret Message"


def test_debug_raises(keys, monkeypatch):
  alice_sk, alice_pk, bob_sk, bob_pk = keys
  payload = suite25519.encrypt("Secret Message", suite25519.SigningPublicKey.import_base64(bob_pk.read_text()))
  monkeypatch.setattr("sys.stdin", TextIOWrapper(BytesIO(payload)))
  sys.argv = ["suite25519", "dec", "--debug", "-i", str(alice_sk)]
  with pytest.raises(AuthenticationFailedError):
    main()
