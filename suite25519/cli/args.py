import sys

from suite25519.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.seckeys = []
    self.pubkeys = []
    self.outfile = []
    self.include_message = None
    self.include_pubkey = None
    self.anonymous = None
    self.armor = None
    self.paste = None
    self.debug = None


keygenargs = dict(
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)

pubkeyargs = dict(
  seckeys='-i --identity'.split(),
  debug='--debug'.split(),
)

signargs = dict(
  seckeys='-i --identity'.split(),
  include_message='-m --include-message'.split(),
  include_pubkey='-P --include-pubkey'.split(),
  outfile='-o --out --output'.split(),
  armor='-a --armor'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  pubkeys='-r --signer'.split(),
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)

encargs = dict(
  pubkeys='-r --recipient'.split(),
  seckeys='-i --identity'.split(),
  anonymous='--anonymous'.split(),
  outfile='-o --out --output'.split(),
  armor='-a --armor'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

decargs = dict(
  seckeys='-i --identity'.split(),
  pubkeys='-r --sender'.split(),
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)


def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'genkey'): return 'keygen', keygenargs
  if arg in ('pubkey', ): return 'pubkey', pubkeyargs
  if arg in ('sign', '-s'): return 'sign', signargs
  if arg in ('verify', ): return 'verify', verifyargs
  if arg in ('enc', 'encrypt', '-e'): return 'enc', encargs
  if arg in ('dec', 'decrypt', '-d'): return 'dec', decargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing to support combined short flags like -mPi key
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  # Separate mode selector from other arguments (-eA is -e -A)
  if av[0].startswith("-") and not av[0].startswith("--") and len(av[0]) > 2 and not needhelp(av):
    av.insert(1, f"-{av[0][2:]}")
    av[0] = av[0][:2]

  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/pubkey/sign/verify/enc/dec/help).\n')
    sys.exit(1)

  flags = {flag: var for var, switches in ad.items() for flag in switches}
  aiter = iter(av[1:])
  for a in aiter:
    if a == '-':
      args.files.append(True)
      continue
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      switches = [a.lower()]
    else:
      switches = [f'-{s}' for s in a[1:]]
      unknown = [s for s in switches if s not in flags]
      if unknown:
        print_help(args.mode, f' 💣  Unknown argument: suite25519 {args.mode} {a} (failing {" ".join(unknown)})')
    for s in switches:
      argvar = flags.get(s)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: suite25519 {args.mode} {a}')
      var = getattr(args, argvar)
      if isinstance(var, list):
        try:
          var.append(next(aiter))
        except StopIteration:
          print_help(args.mode, f' 💣  Argument parameter missing: suite25519 {args.mode} {a} …')
      else:
        setattr(args, argvar, True)

  return args
