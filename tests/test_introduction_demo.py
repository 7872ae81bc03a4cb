import importlib.util
import io
from pathlib import Path

from brainfuck import BrainfuckInterpreter

DEMO_PATH = Path(__file__).resolve().parent.parent / "01_brainfuck_introduction.py"


def load_demo():
    spec = importlib.util.spec_from_file_location("brainfuck_introduction", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_greeting_programs_print_hello_world(capsys):
    demo = load_demo()
    out = io.StringIO()
    demo.demonstrate_hello_world(BrainfuckInterpreter(io.BytesIO(), out))
    assert out.getvalue() == "Hello World!\n" * 2
    assert "A Trickier Hello World" in capsys.readouterr().out


def test_demo_self_interpreters_run_hello_world(capsys):
    demo = load_demo()
    out = io.StringIO()
    demo.demonstrate_self_interpreter(BrainfuckInterpreter(io.BytesIO(), out))
    assert out.getvalue() == "Hello World!\n" * 2
    printed = capsys.readouterr().out
    assert "-- dbfi --" in printed
    assert "-- cgbfi --" in printed
