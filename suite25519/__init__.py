"""Ed25519 signatures and ECIES encryption with compact msgpack envelopes."""

__version__ = "1.0.0"

from suite25519.api import (
  decrypt, decrypt_and_verify, derive_public_key, encrypt, generate_key, sign, sign_and_encrypt, verify
)
from suite25519.exceptions import (
  AuthenticationFailedError, DecodeError, KeyMismatchError, SignatureInvalidError, ValidationError,
  VerificationError
)
from suite25519.keys import SigningPrivateKey, SigningPublicKey
from suite25519.message import Message, Signature

__all__ = [
  "AuthenticationFailedError",
  "DecodeError",
  "KeyMismatchError",
  "Message",
  "Signature",
  "SignatureInvalidError",
  "SigningPrivateKey",
  "SigningPublicKey",
  "ValidationError",
  "VerificationError",
  "decrypt",
  "decrypt_and_verify",
  "derive_public_key",
  "encrypt",
  "generate_key",
  "sign",
  "sign_and_encrypt",
  "verify",
]
