import os
import shlex
import subprocess
import sys
from collections import namedtuple


DEFAULT_CC = 'gcc'
DEFAULT_CC_BINARY = 'cc_bin'

# Exit statuses a shell would report
CANNOT_EXECUTE = 126
COMMAND_NOT_FOUND = 127
KILLED_BY_SIGNAL = 128


class Toolchain(namedtuple('Toolchain', ['preprocessor', 'compiler', 'linker'])):
    pass


class ExternalTool:
    def __init__(self, command):
        self.command = list(command)

    def invoke(self, args) -> int:
        try:
            result = subprocess.run(self.command + list(args), check=False)
        except FileNotFoundError:
            print(f'{self.command[0]}: command not found', file=sys.stderr)
            return COMMAND_NOT_FOUND
        except PermissionError:
            print(f'{self.command[0]}: cannot execute', file=sys.stderr)
            return CANNOT_EXECUTE

        # subprocess reports death by signal N as -N
        if result.returncode < 0:
            return KILLED_BY_SIGNAL - result.returncode
        return result.returncode

    def __repr__(self):
        return f'ExternalTool({self.command!r})'


def default_toolchain(environ=None):
    if environ is None:
        environ = os.environ
    cc = shlex.split(environ.get('CC') or DEFAULT_CC)
    cc_binary = shlex.split(environ.get('CC_BINARY') or DEFAULT_CC_BINARY)

    return Toolchain(
        preprocessor=ExternalTool(cc + ['-E', '-P']),
        compiler=ExternalTool(cc_binary),
        linker=ExternalTool(cc),
    )
