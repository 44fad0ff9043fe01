import re
from base64 import b64decode, b64encode

ARMOR_MAX_SINGLELINE = 4000  # Safe limit for line input, where 4096 may be the limit
ARMOR_LINE_LENGTH = 76


def armor_decode(data: str) -> bytes:
  """Base64 decode, with or without padding and line wrapping."""
  # Fix CRLF, remove any surrounding BOM, whitespace and code block markers
  data = data.replace('\r\n', '\n').strip('\uFEFF`> \t\n')
  if not data.isascii():
    raise ValueError("Invalid armored encoding: data is not ASCII/Base64")
  # Strip indent and quote marks, trailing whitespace and empty lines
  lines = [line for l in data.split('\n') if (line := l.lstrip('\t >').rstrip())]
  if not lines:
    return b''
  r = re.compile("^[A-Za-z0-9+/]+={0,2}$")
  for i, line in enumerate(lines):
    if not r.match(line):
      raise ValueError(f"Invalid armored encoding: unrecognized data on line {i + 1}")
  data = "".join(lines).rstrip('=')
  if '=' in data:
    raise ValueError("Invalid armored encoding: padding in the middle of data")
  padding = -len(data) % 4
  if padding == 3:
    raise ValueError("Invalid armored encoding: invalid length for Base64 sequence")
  return b64decode(data + padding*'=', validate=True)


def armor_encode(data: bytes) -> str:
  """Standard Base64, wrapped to lines of 76 characters when very long."""
  d = b64encode(data).decode()
  if len(d) > ARMOR_MAX_SINGLELINE:
    d = '\n'.join([d[i:i + ARMOR_LINE_LENGTH] for i in range(0, len(d), ARMOR_LINE_LENGTH)])
  return d
