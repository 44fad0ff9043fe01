import logging
import sys
from typing import NoReturn

import colorama

from suite25519.cli.args import argparse
from suite25519.cli.help import print_help
from suite25519.cli.keys import main_keygen, main_pubkey
from suite25519.cli.msg import main_dec, main_enc, main_sign, main_verify
from suite25519.exceptions import CliArgError

modes = {
  "keygen": main_keygen,
  "pubkey": main_pubkey,
  "sign": main_sign,
  "verify": main_verify,
  "enc": main_enc,
  "dec": main_dec,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Use the functions of suite25519 directly if calling from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Any other error: invalid keys, failed verification or decryption, ...

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  if args.debug:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except CliArgError as e:
    print_help(args.mode, f" 💣  {e}")
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
