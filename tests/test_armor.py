from secrets import token_bytes

import pytest

from suite25519.util import armor_decode, armor_encode


def test_armor_valid():
  data = token_bytes(10000)
  for i in [10000, 9999, 9998, 9000, 5000] + list(range(100)):
    d = data[i:]
    text = armor_encode(d)
    binary = armor_decode('\n\n    >>> ```\n' + text.replace('\n', '   \r\n\t>>>  ') + '>>> ```\n>>>\n')
    assert binary == d


def test_armor_standard_base64():
  assert armor_encode(b"ab") == "YWI="
  assert armor_decode("YWI=") == b"ab"
  # Padding is optional on input
  assert armor_decode("YWI") == b"ab"
  assert armor_decode(" YWI=\n") == b"ab"
  assert armor_decode("") == b""


def test_armor_long_lines():
  text = armor_encode(bytes(4000))
  lines = text.split('\n')
  assert all(len(l) == 76 for l in lines[:-1])
  assert armor_decode(text) == bytes(4000)


def test_armor_decode_invalid():
  with pytest.raises(ValueError) as exc:
    armor_decode('\x80')
  assert "ASCII" in str(exc.value)

  with pytest.raises(ValueError) as exc:
    armor_decode('!')
  assert "unrecognized data on line 1" in str(exc.value)

  with pytest.raises(ValueError) as exc:
    armor_decode('AAAA\n-AAA')
  assert "unrecognized data on line 2" in str(exc.value)

  with pytest.raises(ValueError) as exc:
    armor_decode('AAAAA')
  assert "invalid length" in str(exc.value)

  with pytest.raises(ValueError) as exc:
    armor_decode('AA==\nAAAA')
  assert "padding" in str(exc.value)
