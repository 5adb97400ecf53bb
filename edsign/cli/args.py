import sys

from edsign.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.identities = []
    self.recipients = []
    self.signatures = []
    self.rounds = "10"
    self.debug = None


# Every option takes one value and fills the Args attribute it maps to
options = dict(
  keygen={'-i': 'identities', '--seed': 'identities'},
  sign={'-i': 'identities', '--seed': 'identities', '-r': 'recipients', '--pubkey': 'recipients'},
  verify={'-r': 'recipients', '--pubkey': 'recipients', '-s': 'signatures', '--signature': 'signatures'},
  bench={'-n': 'rounds', '--rounds': 'rounds'},
)

modenames = {
  'keygen': 'keygen', 'genkey': 'keygen', '-k': 'keygen',
  'sign': 'sign',
  'verify': 'verify',
  'bench': 'bench', 'benchmark': 'bench',
}

helpflags = ('-h', '--help')


def argparse() -> Args:
  av = sys.argv[1:]
  if not av:
    print_help()
  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  # Keygen options may be glued to the mode flag: -ki seed means -k -i seed
  if av[0].startswith('-k') and len(av[0]) > 2 and av[0] not in helpflags:
    av[:1] = ['-k', f'-{av[0][2:]}']

  if av[0] == 'help':
    print_help(modenames.get(av[1], 'help') if len(av) > 1 else 'help')

  args = Args()
  args.mode = modenames.get(av[0])
  if args.mode is None:
    if any(a in helpflags for a in av): print_help('help')
    sys.stderr.write(' 💣  Invalid or missing command (keygen/sign/verify/bench/help).\n')
    sys.exit(1)

  modeopts = options[args.mode]
  rest = iter(av[1:])
  for a in rest:
    if a == '--':
      args.files += rest  # Anything after -- is a file name
      break
    if a in helpflags:
      print_help(args.mode)
    if a == '-':
      args.files.append(True)  # stdin
    elif not a.startswith('-'):
      args.files.append(a)
    elif a.lower() == '--debug':
      args.debug = True
    elif (attr := modeopts.get(a.lower() if a.startswith('--') else a)):
      value = next(rest, None)
      if value is None:
        print_help(args.mode, f' 💣  Argument parameter missing: edsign {args.mode} {a} …')
      if isinstance(getattr(args, attr), list):
        getattr(args, attr).append(value)
      else:
        setattr(args, attr, value)
    else:
      print_help(args.mode, f' 💣  Unknown argument: edsign {args.mode} {a}')
  return args
