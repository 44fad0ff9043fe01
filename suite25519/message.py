from typing import Union

from suite25519 import primitives
from suite25519.exceptions import ValidationError


class Message:
  """Message bytes, created from bytes or from text (UTF-8)."""

  __slots__ = ("data", )

  def __init__(self, data: Union[str, bytes, bytearray, memoryview]):
    if isinstance(data, str):
      data = data.encode()
    elif isinstance(data, (bytes, bytearray, memoryview)):
      data = bytes(data)
    else:
      raise ValidationError(f"Message must be str or bytes, not {type(data).__name__}")
    object.__setattr__(self, "data", data)

  def __setattr__(self, name, value):
    raise AttributeError("Message is immutable")

  @classmethod
  def coerce(cls, message: Union["Message", str, bytes]) -> "Message":
    return message if isinstance(message, cls) else cls(message)

  @classmethod
  def random(cls, length: int = 32) -> "Message":
    return cls(primitives.random_bytes(length))

  def __bytes__(self):
    return self.data

  def __len__(self):
    return len(self.data)

  def __eq__(self, other):
    if not isinstance(other, Message):
      return NotImplemented
    return self.data == other.data

  def __hash__(self):
    return hash(self.data)

  def __repr__(self):
    return f"Message[{len(self.data)} bytes]"

  def __str__(self):
    """Text for display only, hex if the data is not UTF-8."""
    try:
      return self.data.decode()
    except UnicodeDecodeError:
      return self.data.hex()


class Signature:
  """Ed25519 signature (R || s)."""

  __slots__ = ("data", )

  def __init__(self, data: bytes):
    object.__setattr__(self, "data", primitives.check_length("Signature", data, primitives.SIGNATURE_SIZE))

  def __setattr__(self, name, value):
    raise AttributeError("Signature is immutable")

  def __bytes__(self):
    return self.data

  def __eq__(self, other):
    if not isinstance(other, Signature):
      return NotImplemented
    return self.data == other.data

  def __hash__(self):
    return hash(self.data)

  def __repr__(self):
    return f"Signature[{self.data.hex()[:8]}]"
