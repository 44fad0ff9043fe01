"""Wrappers over libsodium (PyNaCl), HKDF (cryptography) and the system RNG.

The rest of suite25519 only calls these, so that the call shapes and key
formats of the libraries stay in one place. Sizes are in bytes.
"""
from secrets import token_bytes
from typing import Optional, Tuple

import nacl.bindings as sodium
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from nacl.exceptions import CryptoError

from suite25519.exceptions import ValidationError

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64
AGREEMENT_KEY_SIZE = 32
SYMKEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
KEYID_SIZE = 20


def random_bytes(n: int) -> bytes:
  return token_bytes(n)


def check_length(name: str, data: bytes, size: int) -> bytes:
  if not isinstance(data, (bytes, bytearray, memoryview)):
    raise ValidationError(f"{name} must be a byte sequence, not {type(data).__name__}")
  data = bytes(data)
  if len(data) != size:
    raise ValidationError(f"{name} must be {size} bytes, got {len(data)}")
  return data


## Ed25519


def ed_public(seed: bytes) -> bytes:
  edpk, _ = sodium.crypto_sign_seed_keypair(seed)
  return edpk


def ed_sign(seed: bytes, message: bytes) -> bytes:
  _, edsk = sodium.crypto_sign_seed_keypair(seed)
  # Sodium returns signature + message
  return sodium.crypto_sign(message, edsk)[:SIGNATURE_SIZE]


def ed_verify(edpk: bytes, message: bytes, signature: bytes) -> bool:
  try:
    sodium.crypto_sign_open(signature + message, edpk)
  except CryptoError:
    return False
  return True


## Conversions to Curve25519 (X25519)


def ed_to_x_public(edpk: bytes) -> bytes:
  try:
    return sodium.crypto_sign_ed25519_pk_to_curve25519(edpk)
  except RuntimeError:  # Unexpected library error from nacl.bindings
    raise ValidationError("Invalid Ed25519 public key") from None


def ed_to_x_secret(seed: bytes) -> bytes:
  # Sodium edsk are actually seed + edpk but only the seed is used here
  return sodium.crypto_sign_ed25519_sk_to_curve25519(seed + bytes(PUBLIC_KEY_SIZE))


## X25519


def x_keypair() -> Tuple[bytes, bytes]:
  """Fresh Curve25519 keypair as (pk, sk)."""
  sk = random_bytes(AGREEMENT_KEY_SIZE)
  return sodium.crypto_scalarmult_base(sk), sk


def x_shared(sk: bytes, pk: bytes) -> bytes:
  """Key agreement. Raises CryptoError on low order points."""
  return sodium.crypto_scalarmult(sk, pk)


## Symmetric


def hkdf(secret: bytes, info: bytes, salt: Optional[bytes] = None, length: int = SYMKEY_SIZE) -> bytes:
  return HKDF(algorithm=hashes.SHA256(), length=length, salt=salt, info=info).derive(secret)


def aead_encrypt(message: bytes, nonce: bytes, key: bytes) -> bytes:
  """ChaCha20-Poly1305 (IETF), returns ciphertext with the tag appended."""
  return sodium.crypto_aead_chacha20poly1305_ietf_encrypt(message, None, nonce, key)


def aead_decrypt(ciphertext: bytes, nonce: bytes, key: bytes) -> bytes:
  """Raises CryptoError if the tag does not match."""
  return sodium.crypto_aead_chacha20poly1305_ietf_decrypt(ciphertext, None, nonce, key)


## Hashing and comparison


def keyhash(data: bytes) -> bytes:
  return sodium.crypto_generichash_blake2b_salt_personal(data, digest_size=KEYID_SIZE)


def equal(a: bytes, b: bytes) -> bool:
  """Constant time comparison."""
  return sodium.sodium_memcmp(bytes(a), bytes(b))
