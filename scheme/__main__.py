from __future__ import annotations

import argparse
import logging
import sys

from scheme.config import get_log_level
from scheme.debug_utils.pprint import print_expr
from scheme.errors import SchemeError
from scheme.interpreter import Interpreter
from scheme.interpreter.repl import Repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="scheme", description="Evaluate Scheme programs")
    parser.add_argument("file", nargs="?", help="source file to evaluate; starts a REPL when omitted")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    parser.add_argument("--log-level", default=None, help="logging level (default from SCHEME_LOG_LEVEL)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if args.file is None:
        Repl(interp, color=sys.stdout.isatty()).run()
        return 0

    try:
        result = interp.load(args.file)
    except OSError as e:
        print(f"scheme: cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    except SchemeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print_expr(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
