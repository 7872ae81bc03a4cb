#!/usr/bin/env python3
"""
Demo: The Brainfuck Interpreter at Work

Runs the classic greeting programs through the interpreter and then feeds a
greeting program to a Brainfuck interpreter written in Brainfuck, which
reads its program from input in the form source!input.

Key concepts demonstrated:
- Brainfuck language basics (8 commands)
- Memory model (circular tape of byte cells)
- Nested loops and 8-bit wraparound arithmetic
- Swapping the input source between runs
"""

import io
import sys

from brainfuck import BrainfuckInterpreter

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++."
    "------.--------.>>+.>++."
)

HELLO_WORLD_TRICKY = (
    ">++++++++[<+++++++++>-]<.>>+>+>++>[-]+<[>[->+<<++++>]<<]>.+++++++..+++.>>+++++++.<<<"
    "[[-]<[-]>]<+++++++++++++++.>>.+++.------.--------.>>+.>++++."
)

# Input format: source!input
DBFI = (
    "dbfi>>>+[[-]>>[-]++>+>+++++++[<++++>>++<-]++>>+>+>+++++[>++>++++++<<-]+>>>,<++[[>[->>]"
    "<[>>]<<-]<[<]<+>>[>]>[<+>-[[<+>-]>]<[[[-]<]++<-[<+++++++++>[<->-]>>]>>]]<<]<]<[[<]>[[>]"
    ">>[>>]+[<<]<[<]<+>>-]>[>]+[->>]<<<<[[<<]<[<]+<<[+>+<<-[>-->+<<-[>+<[>>+<<-]]]>[<+>-]<]"
    "++>>-->[>]>>[>>]]<<[>>+<[[<]<]>[[<<]<[<]+[-<+>>-[<<+>++>-[<->[<<+>>-]]]<[>+<-]>]>[>]>]"
    ">[>>]>>]<<[>>+>>+>>]<<[->>>>>>>>]<<[>.>>>>>>>]<<[>->>>>>]<<[>,>>>]<<[>+>]<<[+<<]<]"
)

# Same input format, a different self-interpreter
CGBFI = (
    "cgbfi>>>>>+[->>++>+>+++++++[<++++>>++<-]++>>+>+>+++++[>++>++++++<<-]+>>>,<++[[>[->>]<["
    ">>]<<-]<[<]<+>>[>]>[<+>-[[<+>-]>]<[[[-]<]++<-[<+++++++++>[<->-]>>]>>]]<<]>[-]+<<[--[[-"
    "]>>->+<<<]>>[-<<<<[>+<-]>>>>>>+<]<<]>>[-]<<>>>[<<<+>>>-]<<<]>>>+<<<<[<<]>>[[<+>>+<-]+<"
    "-[-[-[-[-[-[-[->->>[>>]>>[>>]<+<[<<]<<[<<]<]>[->>[>>]>>[>>]<,<[<<]<<[<<]]<]>[->>[>>]>>"
    "[>>]<-<[<<]<<[<<]]<]>[->>[>>]>>[>>]<.<[<<]<<[<<]]<]>[->>[>>]>>[>>]<<-<<[<<]<<[<<]]<]>["
    "->>[>>]>>[>>]+[<<]<<[<<]]<]>[->>[>>]>>[>>]<[>+>>+<<<-]>[<+>-]>>[<<+>>[-]]+<<[>>-<<-]>>"
    "[<<+>>>>+<<-]>>[<<+>>-]<<[>>+<<-]+>>[<<->>-]<<<<[-<<[<<]<<[<<]<<<<<++>>]>>[-<<<<<<[<<]"
    "<<[<<]<]>]<]>[->>[>>]>>[>>]<[>+>>+<<<-]>[[<+>-]>>[-]+<<]>>[<<+>>>>+<<-]>>[<<+>>-]<<[>>"
    "+<<-]+>>[<<->>-]<<<<[-<<[<<]<<[<<]<<<<<+>>]>>[-<<<<<<[<<]<<[<<]<]>]>[<+>-]<<<<<<[>>+<<"
    "-[->>->>+[>>>[-<+>>+<]+<-[-[[-]>[-]<]>[-1<<<+>>>]<]>[-<<<->>>]>[-<+>]<<<<[>>+<<-]>>]<<"
    "<<<<]>>[-<<+[>>>[-<+>>+<]+<-[-[[-]>[-]<]>[-1<<<->>>]<]>[-<<<+>>>]>[-<+>]<<<<[<<+>>-]<<"
    "]]]>>>>>>>]"
)


def print_header(title):
    """Print a formatted section header"""
    print(f"\n{'='*60}")
    print(f" {title}")
    print(f"{'='*60}")


def demonstrate_hello_world(interpreter):
    print_header("Hello World")
    print(f"Program: {HELLO_WORLD}\n")
    interpreter.interpret(HELLO_WORLD)

    print_header("A Trickier Hello World")
    print(f"Program: {HELLO_WORLD_TRICKY}\n")
    interpreter.interpret(HELLO_WORLD_TRICKY)


def demonstrate_self_interpreter(interpreter):
    """Brainfuck interpreting Brainfuck: the source arrives through input."""
    print_header("Brainfuck in Brainfuck")
    print("Input: <hello world program>!\n")
    for name, self_interpreter in (("dbfi", DBFI), ("cgbfi", CGBFI)):
        print(f"\n-- {name} --")
        interpreter.set_input(io.BytesIO((HELLO_WORLD + "!").encode("ascii")))
        interpreter.interpret(self_interpreter)


def main():
    interpreter = BrainfuckInterpreter(output_stream=sys.stdout)
    demonstrate_hello_world(interpreter)
    demonstrate_self_interpreter(interpreter)


if __name__ == "__main__":
    main()
