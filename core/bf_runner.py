import argparse
import io
import logging
import os
import sys
from typing import Optional, Sequence, Union

from dotenv import load_dotenv

from brainfuck import BrainfuckError, BrainfuckInterpreter

load_dotenv()

DEFAULT_MEMORY_SIZE = int(os.environ.get("BF_MEMORY_SIZE", "65535"))
DEFAULT_LOG_LEVEL = os.environ.get("BF_LOG_LEVEL", "WARNING").upper()
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = logging.getLogger(__name__)


def run_program(code: str, input_data: Union[bytes, str] = b"", memory_size: int = DEFAULT_MEMORY_SIZE) -> str:
    """Execute BF code against in-memory input, return everything it printed.
    Text input is encoded as UTF-8, the same as `bf-run --input`.
    Fresh memory and fresh streams on every call (stateless).
    """
    if isinstance(input_data, str):
        input_data = input_data.encode("utf-8")
    out = io.StringIO()
    itp = BrainfuckInterpreter(io.BytesIO(input_data), out)
    itp.interpret(code, memory_size)
    return out.getvalue()


def load_program(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def run_file(path: str, memory_size: int = DEFAULT_MEMORY_SIZE, itp: Optional[BrainfuckInterpreter] = None) -> None:
    """Load a program file and run it against the interpreter's streams
    (standard input/output unless a configured interpreter is passed in).
    """
    code = load_program(path)
    logger.info("Loaded %d characters from %s", len(code), path)
    (itp or BrainfuckInterpreter()).interpret(code, memory_size)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="bf-run", description="Run a Brainfuck program")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("program", nargs="?", help="Path to a Brainfuck source file")
    src.add_argument("-e", "--execute", metavar="CODE", help="Program text given on the command line")
    ap.add_argument("--memory-size", type=int, default=DEFAULT_MEMORY_SIZE, help="Size of the memory tape in bytes")
    ap.add_argument("--input", dest="input_text", default=None, help="Use this text as input instead of standard input")
    ap.add_argument("--log-level", type=str.upper, default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS)
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    itp = BrainfuckInterpreter()
    if args.input_text is not None:
        itp.set_input(io.BytesIO(args.input_text.encode("utf-8")))

    try:
        if args.execute is not None:
            itp.interpret(args.execute, args.memory_size)
        else:
            run_file(args.program, args.memory_size, itp)
    except OSError as e:
        print(f"bf-run: {e}", file=sys.stderr)
        return 1
    except BrainfuckError as e:
        print(f"bf-run: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
