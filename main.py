import sys

import driver
from errors import UsageError, InputNotFoundError
from options import Args, build_parser, validate_source


def main(args):
    try:
        parsed = Args.parse(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        build_parser().print_help(sys.stderr)
        return 1
    except SystemExit as e:
        # argparse exits after printing --help
        return e.code

    try:
        validate_source(parsed.name)
    except InputNotFoundError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    return driver.run(parsed.plan, parsed.name)


def cli():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
