import logging
import os
import sys

from suite25519 import api
from suite25519.cli.inout import load_seckey, outfile
from suite25519.exceptions import CliArgError

log = logging.getLogger(__name__)


def main_keygen(args):
  if args.files:
    raise CliArgError("keygen takes no input files")
  key = api.generate_key()
  pk = api.derive_public_key(key)
  log.debug("Generated key %s", pk.id)
  fn = outfile(args)
  if fn:
    try:
      f = open(fn, "x")
    except FileExistsError:
      raise ValueError(f"{fn} already exists, refusing to overwrite a key") from None
    with f:
      if os.name == "posix":
        os.chmod(fn, 0o600)
      f.write(f"{key.export_base64()}\n")
    sys.stderr.write(f" 🔑 Secret key written to {fn}\n")
  else:
    sys.stdout.write(f"{key.export_base64()}\n")
  sys.stderr.write(f" 🔑 Public key: {pk.export_base64()}\n")


def main_pubkey(args):
  if args.files:
    raise CliArgError("pubkey takes no input files")
  pk = load_seckey(args).public_key
  sys.stdout.write(f"{pk.export_base64()}\n")
  sys.stderr.write(f" 🔑 Key id: {pk.id}\n")
