import argparse
import pathlib
from collections import namedtuple
from enum import IntEnum

from errors import UsageError, InputNotFoundError


class Stage(IntEnum):
    ''' The furthest stage to run. FULL goes all the way through linking. '''
    LEX = 1
    PARSE = 2
    CODEGEN = 3
    FULL = 4


class StagePlan(namedtuple('StagePlan', ['stage', 'emit_assembly'])):
    pass


FLAGS = ['-l', '--lex', '-p', '--parse', '-c', '--codegen', '-S']
HELP_FLAGS = ['-h', '--help']


class Args(namedtuple('Args', ['name', 'plan'])):
    @classmethod
    def parse(cls, args):
        # Flags are matched whole: no bundles like -lp, no -- separator
        if not any(arg in HELP_FLAGS for arg in args):
            for arg in args:
                if arg.startswith('-') and arg not in FLAGS:
                    raise UsageError(f"Unknown option '{arg}'")

        parser = build_parser()
        parsed, extras = parser.parse_known_args(args)

        if parsed.name is not None and parsed.name.startswith('-'):
            extras.insert(0, parsed.name)
        for extra in extras:
            if extra.startswith('-'):
                raise UsageError(f"Unknown option '{extra}'")
            raise UsageError(f"Unexpected argument '{extra}'")
        if parsed.name is None:
            raise UsageError('Error: missing file argument.')

        stage = resolve_stage(parsed.lex, parsed.parse, parsed.codegen)
        return Args(parsed.name, StagePlan(stage, parsed.emit_assembly))



class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = _Parser(prog='fcc', description='Compiler driver', allow_abbrev=False)
    parser.add_argument('name', metavar='source.c', nargs='?', help='source file to compile')

    # These are not mutually exclusive: the earliest stage given wins
    parser.add_argument('-l', '--lex', action='store_true', help='run the lexer and stop')
    parser.add_argument('-p', '--parse', action='store_true', help='run the lexer and parser and stop')
    parser.add_argument(
        '-c', '--codegen', action='store_true',
        help='run the lexer, parser and assembly generation, but stop before code emission')
    parser.add_argument(
        '-S', dest='emit_assembly', action='store_true',
        help='write the assembly file <source.s> and stop before linking')
    return parser


def resolve_stage(lex, parse, codegen):
    if lex:
        return Stage.LEX
    if parse:
        return Stage.PARSE
    if codegen:
        return Stage.CODEGEN
    return Stage.FULL


def validate_source(name):
    if not pathlib.Path(name).is_file():
        raise InputNotFoundError(name)
    return name
