import os
import sys
from contextlib import suppress

import pyperclip

from suite25519 import util
from suite25519.exceptions import CliArgError, ValidationError
from suite25519.keys import SigningPrivateKey, SigningPublicKey


def _keytext(keystr: str) -> str:
  """Key string from the command line, or the contents of a keyfile."""
  if os.path.isfile(keystr):
    with open(keystr, "rb") as f:
      try:
        return f.read().decode()
      except ValueError:
        raise ValueError(f"Keyfile {keystr} could not be decoded. Only Base64 text is supported.")
  return keystr


def load_seckey(args) -> SigningPrivateKey:
  if len(args.seckeys) != 1:
    raise CliArgError("Exactly one secret key must be given with -i")
  keystr = args.seckeys[0]
  try:
    return SigningPrivateKey.import_base64(_keytext(keystr))
  except ValidationError:
    # Do not echo the argument, it might be the secret itself
    raise ValueError("Unrecognized secret key (Base64 or a keyfile expected)") from None


def load_pubkey(args, required=True):
  if not args.pubkeys and not required:
    return None
  if len(args.pubkeys) != 1:
    raise CliArgError("Exactly one public key must be given with -r")
  keystr = args.pubkeys[0]
  try:
    return SigningPublicKey.import_base64(_keytext(keystr))
  except ValidationError:
    raise ValueError(f"Unrecognized public key {keystr}") from None


def read_input(args) -> bytes:
  if len(args.files) > 1:
    raise CliArgError("Only one input file may be specified")
  if not args.files or args.files[0] is True:
    return sys.stdin.buffer.read()
  with open(args.files[0], "rb") as f:
    return f.read()


def read_envelope(args) -> bytes:
  """Envelope bytes from armored text or raw binary input."""
  data = read_input(args)
  with suppress(ValueError):
    return util.armor_decode(data.decode())
  return data


def outfile(args):
  if len(args.outfile) > 1:
    raise CliArgError("Only one output file may be specified")
  return args.outfile[0] if args.outfile else None


def write_envelope(args, data: bytes) -> None:
  fn = outfile(args)
  text = util.armor_encode(data)
  if fn:
    with open(fn, "w" if args.armor else "wb") as f:
      f.write(f"{text}\n" if args.armor else data)
  if args.paste:
    pyperclip.copy(text)
    sys.stderr.write(" 📋 Copied to clipboard.\n")
  elif not fn:
    sys.stdout.write(f"{text}\n")


def write_message(args, data: bytes) -> None:
  fn = outfile(args)
  if fn:
    with open(fn, "wb") as f:
      f.write(data)
    return
  try:
    text = data.decode()
  except UnicodeDecodeError:
    if sys.stdout.isatty():
      raise ValueError("The message is binary data, use -o to write it to a file")
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    return
  sys.stdout.write(text if text.endswith("\n") else f"{text}\n")
