"""Wire envelopes, msgpack maps of fixed field names to binary values.

  SignedEnvelope   sig (64 bytes), m (optional), P (32 bytes, optional)
  EciesEnvelope    C (ciphertext and 16 byte tag), P_e (32 bytes), N (12 bytes)

An empty value is not the same as a missing field: an empty message travels
as m=b"" while a detached one has no m at all.
"""
from dataclasses import MISSING, dataclass, fields
from typing import Optional

import msgpack

from suite25519 import primitives
from suite25519.exceptions import DecodeError, ValidationError

assert msgpack.version >= (1, 0, 0), 'Old 0.5.6 version does not separate str and bin types.'


def _bytes(name: str, value, size: Optional[int] = None, minsize: int = 0) -> bytes:
  if size is not None:
    return primitives.check_length(f"Field {name}", value, size)
  if not isinstance(value, (bytes, bytearray, memoryview)):
    raise ValidationError(f"Field {name} must be a byte sequence, not {type(value).__name__}")
  value = bytes(value)
  if len(value) < minsize:
    raise ValidationError(f"Field {name} must be at least {minsize} bytes, got {len(value)}")
  return value


def _unpack(cls, data: bytes) -> dict:
  if not isinstance(data, (bytes, bytearray, memoryview)):
    raise ValidationError(f"Envelope must be bytes, not {type(data).__name__}")
  try:
    record = msgpack.unpackb(bytes(data), raw=False, strict_map_key=True)
  except (ValueError, TypeError, msgpack.UnpackException):
    raise DecodeError(f"{cls.__name__} is not valid msgpack data") from None
  if not isinstance(record, dict):
    raise DecodeError(f"{cls.__name__} must be a map, not {type(record).__name__}")
  known = {f.name for f in fields(cls)}
  unknown = [k for k in record if k not in known]
  if unknown:
    raise ValidationError(f"{cls.__name__} has unknown fields {unknown!r}")
  required = [f.name for f in fields(cls) if f.default is MISSING]
  missing = [k for k in required if k not in record]
  if missing:
    raise ValidationError(f"{cls.__name__} is missing required field {missing[0]!r}")
  return record


@dataclass(frozen=True)
class SignedEnvelope:
  sig: bytes
  m: Optional[bytes] = None
  P: Optional[bytes] = None

  def __post_init__(self):
    object.__setattr__(self, "sig", _bytes("sig", self.sig, primitives.SIGNATURE_SIZE))
    if self.m is not None:
      object.__setattr__(self, "m", _bytes("m", self.m))
    if self.P is not None:
      object.__setattr__(self, "P", _bytes("P", self.P, primitives.PUBLIC_KEY_SIZE))

  def encode(self) -> bytes:
    record = dict(sig=self.sig)
    if self.m is not None:
      record["m"] = self.m
    if self.P is not None:
      record["P"] = self.P
    return msgpack.packb(record, use_bin_type=True)

  @classmethod
  def decode(cls, data: bytes) -> "SignedEnvelope":
    record = _unpack(cls, data)
    # A nil value is a type error, absence is expressed by leaving the field out
    for k in "m", "P":
      if k in record and record[k] is None:
        raise ValidationError(f"Field {k} must be a byte sequence, not NoneType")
    return cls(**record)


@dataclass(frozen=True)
class EciesEnvelope:
  C: bytes
  P_e: bytes
  N: bytes

  def __post_init__(self):
    object.__setattr__(self, "C", _bytes("C", self.C, minsize=primitives.TAG_SIZE))
    object.__setattr__(self, "P_e", _bytes("P_e", self.P_e, primitives.AGREEMENT_KEY_SIZE))
    object.__setattr__(self, "N", _bytes("N", self.N, primitives.NONCE_SIZE))

  def encode(self) -> bytes:
    return msgpack.packb(dict(C=self.C, P_e=self.P_e, N=self.N), use_bin_type=True)

  @classmethod
  def decode(cls, data: bytes) -> "EciesEnvelope":
    return cls(**_unpack(cls, data))
