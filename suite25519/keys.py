from typing import Union

from suite25519 import primitives, util
from suite25519.envelope import EciesEnvelope
from suite25519.exceptions import ValidationError
from suite25519.message import Message, Signature


def _import_base64(keystr: str, what: str, size: int) -> bytes:
  if not isinstance(keystr, str):
    raise ValidationError(f"{what} must be given as a Base64 string")
  try:
    keybytes = util.armor_decode(keystr)
  except ValueError:
    raise ValidationError(f"Unable to parse {what}, Base64 expected") from None
  return primitives.check_length(what, keybytes, size)


class SigningPublicKey:
  """Ed25519 public key."""

  __slots__ = ("data", )

  def __init__(self, data: bytes):
    object.__setattr__(self, "data", primitives.check_length("Public key", data, primitives.PUBLIC_KEY_SIZE))

  def __setattr__(self, name, value):
    raise AttributeError("SigningPublicKey is immutable")

  def __bytes__(self):
    return self.data

  def __eq__(self, other):
    if not isinstance(other, SigningPublicKey):
      return NotImplemented
    return self.data == other.data

  def __hash__(self):
    return hash(self.data)

  def __repr__(self):
    return f"SigningPublicKey[{self.id[:8]}]"

  @property
  def id(self) -> str:
    """Key identifier, 40 hex digits of BLAKE2b-160 of the key."""
    return primitives.keyhash(self.data).hex()

  def same_id(self, other: "SigningPublicKey") -> bool:
    return primitives.equal(self.id.encode(), other.id.encode())

  def _agreement_key(self) -> bytes:
    """Curve25519 public key for ECIES."""
    return primitives.ed_to_x_public(self.data)

  def verify(self, message: Union[Message, str, bytes], signature: Signature) -> bool:
    """Check a detached signature, returns False on any failure."""
    return primitives.ed_verify(self.data, bytes(Message.coerce(message)), bytes(signature))

  def encrypt(self, message: Union[Message, str, bytes]) -> bytes:
    """Encrypt for this key, returning an encoded EciesEnvelope."""
    from suite25519 import ecies  # ecies depends on this module
    return ecies.encrypt(self, bytes(Message.coerce(message))).encode()

  def export_base64(self) -> str:
    return util.armor_encode(self.data)

  @classmethod
  def import_base64(cls, keystr: str) -> "SigningPublicKey":
    return cls(_import_base64(keystr, "public key", primitives.PUBLIC_KEY_SIZE))


class SigningPrivateKey:
  """Ed25519 secret key (the 32 byte seed)."""

  __slots__ = ("data", )

  def __init__(self, data: bytes):
    object.__setattr__(self, "data", primitives.check_length("Secret key", data, primitives.SEED_SIZE))

  def __setattr__(self, name, value):
    raise AttributeError("SigningPrivateKey is immutable")

  @classmethod
  def generate(cls) -> "SigningPrivateKey":
    return cls(primitives.random_bytes(primitives.SEED_SIZE))

  def __bytes__(self):
    return self.data

  def __eq__(self, other):
    if not isinstance(other, SigningPrivateKey):
      return NotImplemented
    return primitives.equal(self.data, other.data)

  def __hash__(self):
    return hash(self.public_key)

  def __repr__(self):
    # Never show the secret itself
    return f"SigningPrivateKey[{self.public_key.id[:8]}]"

  @property
  def public_key(self) -> SigningPublicKey:
    return SigningPublicKey(primitives.ed_public(self.data))

  def _agreement_key(self) -> bytes:
    """Curve25519 secret key for ECIES."""
    return primitives.ed_to_x_secret(self.data)

  def sign(self, message: Union[Message, str, bytes]) -> Signature:
    return Signature(primitives.ed_sign(self.data, bytes(Message.coerce(message))))

  def decrypt(self, payload: bytes) -> Message:
    from suite25519 import ecies
    return Message(ecies.decrypt(self, EciesEnvelope.decode(payload)))

  def export_base64(self) -> str:
    return util.armor_encode(self.data)

  @classmethod
  def import_base64(cls, keystr: str) -> "SigningPrivateKey":
    return cls(_import_base64(keystr, "secret key", primitives.SEED_SIZE))
