import logging
import sys

from suite25519 import api
from suite25519.cli.inout import load_pubkey, load_seckey, read_envelope, read_input, write_envelope, write_message
from suite25519.exceptions import CliArgError

log = logging.getLogger(__name__)


def main_sign(args):
  key = load_seckey(args)
  message = read_input(args)
  if not args.include_message:
    sys.stderr.write(" ⚠️  Message not included (-m), the signature cannot be checked by verify.\n")
  log.debug("Signing %d bytes with %s", len(message), key.public_key.id)
  write_envelope(args, api.sign(message, key, bool(args.include_message), bool(args.include_pubkey)))


def main_verify(args):
  pk = load_pubkey(args)
  payload = read_envelope(args)
  log.debug("Verifying %d byte envelope against %s", len(payload), pk.id)
  message = api.verify(payload, pk)
  sys.stderr.write(f" ✅ Signed by {pk.id}\n")
  write_message(args, message)


def main_enc(args):
  recipient = load_pubkey(args)
  sender = load_seckey(args) if args.seckeys else None
  if args.anonymous and not sender:
    raise CliArgError("--anonymous only applies when signing with -i")
  message = read_input(args)
  if sender:
    log.debug("Signing with %s and encrypting %d bytes for %s", sender.public_key.id, len(message), recipient.id)
    payload = api.sign_and_encrypt(message, sender, recipient, not args.anonymous)
  else:
    log.debug("Encrypting %d bytes for %s", len(message), recipient.id)
    payload = api.encrypt(message, recipient)
  write_envelope(args, payload)


def main_dec(args):
  key = load_seckey(args)
  sender = load_pubkey(args, required=False)
  payload = read_envelope(args)
  log.debug("Decrypting %d byte envelope with %s", len(payload), key.public_key.id)
  if sender:
    message = api.decrypt_and_verify(payload, key, sender)
    sys.stderr.write(f" ✅ Signed by {sender.id}\n")
  else:
    message = api.decrypt(payload, key)
  write_message(args, message)
