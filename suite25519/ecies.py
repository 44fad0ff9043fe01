from nacl.exceptions import CryptoError

from suite25519 import primitives
from suite25519.envelope import EciesEnvelope
from suite25519.exceptions import AuthenticationFailedError
from suite25519.keys import SigningPrivateKey, SigningPublicKey

# HKDF info label, bump the version if the cipher or derivation ever changes
KDF_INFO = b"suite25519/v1/chacha20poly1305-key"


def derive_symkey(shared: bytes) -> bytes:
  """Symmetric key from the X25519 shared secret.

  No salt is used: the shared secret is already unique per message because
  the ephemeral key is, and the info label separates this key from any other
  use of the same secret.
  """
  return primitives.hkdf(shared, KDF_INFO)


def encrypt(recipient: SigningPublicKey, plaintext: bytes) -> EciesEnvelope:
  recipient_pk = recipient._agreement_key()
  # Never cache the ephemeral key, nonce uniqueness relies on a fresh key
  eph_pk, eph_sk = primitives.x_keypair()
  key = derive_symkey(primitives.x_shared(eph_sk, recipient_pk))
  nonce = primitives.random_bytes(primitives.NONCE_SIZE)
  ciphertext = primitives.aead_encrypt(bytes(plaintext), nonce, key)
  return EciesEnvelope(C=ciphertext, P_e=eph_pk, N=nonce)


def decrypt(recipient: SigningPrivateKey, envelope: EciesEnvelope) -> bytes:
  sk = recipient._agreement_key()
  # Same error for any failure, not revealing which part was wrong
  try:
    key = derive_symkey(primitives.x_shared(sk, envelope.P_e))
    return primitives.aead_decrypt(envelope.C, envelope.N, key)
  except CryptoError:
    raise AuthenticationFailedError("Decryption failed (wrong key or corrupted data)") from None
