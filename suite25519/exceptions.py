class ValidationError(ValueError):
  """Input has the wrong shape (length, type or missing field)"""

class DecodeError(ValueError):
  """Envelope bytes could not be parsed as a record"""

class VerificationError(ValueError):
  """Signed envelope was not accepted"""

class KeyMismatchError(VerificationError):
  """Embedded public key differs from the expected sender key"""

class SignatureInvalidError(VerificationError):
  """Signature check failed"""

class AuthenticationFailedError(ValueError):
  """Decryption failed (wrong key or corrupted data)"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
