import sys
from typing import NoReturn, Optional

import suite25519

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}suite25519 {F}keygen {D}[{F}-o {N}secret.key{D}]{N}\n",
  pubkey=f"{C}suite25519 {F}pubkey -i {N}seckey\n",
  sign=f"{C}suite25519 {F}sign -i {N}seckey {D}[{F}-m{D}] [{F}-P{D}] [{F}-A {D}| {F}-o {N}signed.dat {D}[{F}-a{D}]] [{N}message.txt{D}]{N}\n",
  verify=f"{C}suite25519 {F}verify -r {N}pubkey {D}[{F}-o {N}message.txt{D}] [{N}signed.dat{D}]{N}\n",
  enc=f"""\
{C}suite25519 {F}enc -r {N}pubkey {D}[{F}-i {N}seckey {D}[{F}--anonymous{D}]] ⋯
        ⋯  [{F}-A {D}| {F}-o {N}cipher.dat {D}[{F}-a{D}]] [{N}message.txt{D}]{N}
""",
  dec=f"{C}suite25519 {F}dec -i {N}seckey {D}[{F}-r {N}pubkey{D}] [{F}-o {N}message.txt{D}] [{N}cipher.dat{D}]{N}\n",
)

usagetext = dict(
  keygen=f"""\
Create a new secret key, printed in Base64 or written to the given file. The
public key is shown on stderr.
""",
  pubkey=f"""\
Show the public key of a secret key, with its key id on stderr.
""",
  sign=f"""\
Sign a message from a file or stdin. The signed envelope is printed as text.

  {F}-i {N}seckey         Your secret key (Base64 or a file containing it)
  {F}-m{N}                Include the message (needed by {F}verify{N})
  {F}-P{N}                Include your public key
  {F}-o{N} FILENAME       Output file (binary unless {F}-a{N} is used)
  {F}-a{N}                ASCII/text output to file
  {F}-A{N}                Copy the output to clipboard
""",
  verify=f"""\
Verify a signed envelope and output the message.

  {F}-r {N}pubkey         The signer's public key (Base64 or a file containing it)
  {F}-o{N} FILENAME       Write the message to a file
""",
  enc=f"""\
Encrypt a message to the given public key. With {F}-i{N} the message is signed
first and the signature is encrypted along with it, so that only the
recipient can see who sent it.

  {F}-r {N}pubkey         The recipient's public key
  {F}-i {N}seckey         Sign with your secret key
  {F}--anonymous{N}       Leave your public key out of the signed envelope
  {F}-o{N} FILENAME       Output file (binary unless {F}-a{N} is used)
  {F}-a{N}                ASCII/text output to file
  {F}-A{N}                Copy the output to clipboard
""",
  dec=f"""\
Decrypt a message with your secret key. With {F}-r{N} the message must also be
signed by that public key.

  {F}-i {N}seckey         Your secret key
  {F}-r {N}pubkey         The sender's public key
  {F}-o{N} FILENAME       Write the message to a file
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"suite25519 {suite25519.__version__} - Ed25519 signatures and ECIES encryption"
introduction = f"{T}{introduction:78}{N}\n"

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Getting started: create a key with {C}suite25519 {F}keygen{N}, give your {F}pubkey{N} to
others, then use {F}enc{N} and {F}dec{N} to exchange messages. Commonly used options:

  {F}-i {N}seckey         Your secret key (Base64 or a file containing it)
  {F}-r {N}pubkey         Their public key (Base64 or a file containing it)
  {F}-A{N}                Copy the output to clipboard
  {F}--debug{N}           Trace what is done and show errors with tracebacks
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

  - {C}suite25519 {F}keygen -o {N}alice.key
  - {C}suite25519 {F}pubkey -i {N}alice.key {C}> {N}alice.pub
  - {C}suite25519 {F}enc -i {N}alice.key {F}-r {N}bob.pub {F}-o {N}msg.dat message.txt
  - {C}suite25519 {F}dec -i {N}bob.key {F}-r {N}alice.pub msg.dat
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}

{exampleshelp}"""

def print_help(modehelp: Optional[str] = None, error: Optional[str] = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"suite25519 {suite25519.__version__}")
  sys.exit(0)
