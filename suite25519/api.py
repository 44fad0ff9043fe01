"""Signing, encryption and their combination.

All functions take and return bytes (envelopes are msgpack encoded) and keep
no state between calls. Messages may be given as str, bytes or Message.

Sign-then-encrypt places the whole signed envelope, sender key included,
inside the ciphertext so that only the recipient can see who signed it.
"""
from typing import Union

from suite25519 import ecies
from suite25519.envelope import EciesEnvelope, SignedEnvelope
from suite25519.exceptions import KeyMismatchError, SignatureInvalidError, ValidationError
from suite25519.keys import SigningPrivateKey, SigningPublicKey
from suite25519.message import Message, Signature

MessageLike = Union[Message, str, bytes]


def generate_key() -> SigningPrivateKey:
  return SigningPrivateKey.generate()


def derive_public_key(private_key: SigningPrivateKey) -> SigningPublicKey:
  return private_key.public_key


def sign(
  message: MessageLike,
  private_key: SigningPrivateKey,
  include_message: bool = False,
  include_public_key: bool = False,
) -> bytes:
  """Sign a message, returning an encoded SignedEnvelope.

  :param include_message: carry the message in the envelope (needed by verify)
  :param include_public_key: carry the signer's public key in the envelope
  """
  message = Message.coerce(message)
  signature = private_key.sign(message)
  return SignedEnvelope(
    sig=bytes(signature),
    m=bytes(message) if include_message else None,
    P=bytes(private_key.public_key) if include_public_key else None,
  ).encode()


def verify(payload: bytes, expected_public_key: SigningPublicKey) -> bytes:
  """Verify an encoded SignedEnvelope and return the message bytes.

  :raises DecodeError: payload is not a msgpack record
  :raises ValidationError: missing or malformed fields, or no message included
  :raises KeyMismatchError: the envelope carries a different public key
  :raises SignatureInvalidError: the signature does not match
  """
  envelope = SignedEnvelope.decode(payload)
  # Key check first, so that a wrong sender is reported as such
  if envelope.P is not None and not SigningPublicKey(envelope.P).same_id(expected_public_key):
    raise KeyMismatchError("Signed by a different public key than expected")
  if envelope.m is None:
    raise ValidationError("No message included in the signed envelope")
  if not expected_public_key.verify(envelope.m, Signature(envelope.sig)):
    raise SignatureInvalidError("Signature mismatch")
  return envelope.m


def encrypt(message: MessageLike, recipient_public_key: SigningPublicKey) -> bytes:
  """Encrypt for a recipient, returning an encoded EciesEnvelope."""
  return ecies.encrypt(recipient_public_key, bytes(Message.coerce(message))).encode()


def decrypt(payload: bytes, recipient_private_key: SigningPrivateKey) -> bytes:
  """Decrypt an encoded EciesEnvelope.

  :raises DecodeError: payload is not a msgpack record
  :raises ValidationError: missing or malformed fields
  :raises AuthenticationFailedError: wrong key or corrupted data
  """
  return ecies.decrypt(recipient_private_key, EciesEnvelope.decode(payload))


def sign_and_encrypt(
  message: MessageLike,
  sender_private_key: SigningPrivateKey,
  recipient_public_key: SigningPublicKey,
  include_sender_public_key: bool = True,
) -> bytes:
  signed = sign(message, sender_private_key, True, include_sender_public_key)
  return encrypt(signed, recipient_public_key)


def decrypt_and_verify(
  payload: bytes,
  recipient_private_key: SigningPrivateKey,
  expected_sender_public_key: SigningPublicKey,
) -> bytes:
  """Decrypt and then verify the signed envelope inside.

  Raises the errors of decrypt first and then those of verify. Nothing is
  returned unless both succeed.
  """
  signed = decrypt(payload, recipient_private_key)
  return verify(signed, expected_sender_public_key)
