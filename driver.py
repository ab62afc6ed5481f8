import sys

import artifacts
import tools
from errors import StageFailure
from options import Stage


def run(plan, name, toolchain=None):
    if toolchain is None:
        toolchain = tools.default_toolchain()
    names = artifacts.names_for(name)

    # Nothing is cleaned up afterwards, successful or not
    try:
        preprocess(toolchain.preprocessor, name, names.preprocessed)
        compile(toolchain.compiler, plan, names.preprocessed)
        if plan.stage != Stage.FULL or plan.emit_assembly:
            return 0
        assemble_and_link(toolchain.linker, names.assembly, names.executable)
    except StageFailure as e:
        print(e, file=sys.stderr)
        return e.code
    return 0


def preprocess(preprocessor, c_file, preprocessed_file):
    print('Running preprocessor')
    check('Preprocessing', preprocessor.invoke([c_file, '-o', preprocessed_file]))


def compile(compiler, plan, preprocessed_file):
    print('Compiling...')
    check('Compilation', compiler.invoke(compiler_flags(plan) + [preprocessed_file]))


def assemble_and_link(linker, assembly_file, compiled_file):
    print('Assembling...')
    check('Assembly', linker.invoke([assembly_file, '-o', compiled_file]))


def compiler_flags(plan):
    match plan.stage:
        case Stage.LEX:
            flags = ['--lex']
        case Stage.PARSE:
            flags = ['--parse']
        case Stage.CODEGEN:
            flags = ['--codegen']
        case Stage.FULL:
            flags = []
        case _:
            raise Exception(f'unhandled stage {plan.stage}')

    if plan.emit_assembly:
        flags.append('-S')
    return flags


def check(stage, code):
    if code != 0:
        raise StageFailure(stage, code)
