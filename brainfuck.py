#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

Memory is a circular tape of unsigned bytes: moving right from the last cell
lands on cell 0 and moving left from cell 0 lands on the last cell.
"""

import logging
import operator
import sys

import numpy as np

logger = logging.getLogger(__name__)

# Default size, in bytes, of the memory given to each program
DEFAULT_MEMORY_SIZE = 65535

# Value stored by ',' once the input source is exhausted (-1 masked to a byte)
EOF_VALUE = -1 & 0xFF


class BrainfuckError(Exception):
    pass


class InvalidArgument(BrainfuckError, ValueError):
    pass


class MalformedProgram(BrainfuckError):
    """Raised when a loop jump finds no matching bracket."""

    def __init__(self, message, position):
        super().__init__(f"{message} at position {position}")
        self.position = position


class BrainfuckInterpreter:
    """Run Brainfuck programs against an input source and an output sink.

    The input source is anything with ``read(n)``; binary streams return
    bytes and text streams return characters. The output sink is a text
    stream, one character is written per '.' instruction.
    """

    def __init__(self, input_stream=None, output_stream=None):
        if input_stream is None:
            input_stream = getattr(sys.stdin, "buffer", sys.stdin)
        if output_stream is None:
            output_stream = sys.stdout
        self._input = input_stream
        self._output = output_stream

    @property
    def input(self):
        return self._input

    @property
    def output(self):
        return self._output

    def set_input(self, input_stream):
        """Replace the input source used by the next run. It cannot be None."""
        if input_stream is None:
            raise InvalidArgument("input source must not be None")
        self._input = input_stream

    def set_output(self, output_stream):
        """Replace the output sink used by the next run. It cannot be None."""
        if output_stream is None:
            raise InvalidArgument("output sink must not be None")
        self._output = output_stream

    def interpret(self, code, memory_size=DEFAULT_MEMORY_SIZE):
        """Execute Brainfuck code to completion on fresh memory.

        Errors raised by the input source or output sink propagate to the
        caller and abort the run.
        """
        memory_size = self._check_memory_size(memory_size)

        memory = np.zeros(memory_size, dtype=np.uint8)
        pointer = 0
        instruction_pointer = 0
        length = len(code)
        logger.debug("Running %d instructions with %d bytes of memory", length, memory_size)

        while instruction_pointer < length:
            cmd = code[instruction_pointer]

            if cmd == '>':
                pointer += 1
                if pointer == memory_size:
                    pointer = 0

            elif cmd == '<':
                pointer -= 1
                if pointer < 0:
                    pointer = memory_size - 1

            elif cmd == '+':
                memory[pointer] = (int(memory[pointer]) + 1) & 0xFF

            elif cmd == '-':
                memory[pointer] = (int(memory[pointer]) - 1) & 0xFF

            elif cmd == '.':
                self._output.write(chr(memory[pointer]))

            elif cmd == ',':
                memory[pointer] = self._read_byte()

            elif cmd == '[':
                if memory[pointer] == 0:
                    instruction_pointer = self._find_loop_end(code, instruction_pointer)

            elif cmd == ']':
                if memory[pointer] != 0:
                    instruction_pointer = self._find_loop_start(code, instruction_pointer)

            instruction_pointer += 1

        flush = getattr(self._output, "flush", None)
        if flush is not None:
            flush()
        logger.debug("Program finished")

    @staticmethod
    def _check_memory_size(memory_size):
        if isinstance(memory_size, (bool, np.bool_)):
            raise InvalidArgument(f"memory size must be a positive integer, got {memory_size!r}")
        try:
            size = operator.index(memory_size)
        except TypeError:
            raise InvalidArgument(f"memory size must be a positive integer, got {memory_size!r}") from None
        if size < 1:
            raise InvalidArgument(f"memory size must be a positive integer, got {memory_size!r}")
        return size

    def _read_byte(self):
        chunk = self._input.read(1)
        if not chunk:
            return EOF_VALUE
        if isinstance(chunk, str):
            return ord(chunk) & 0xFF
        return chunk[0] & 0xFF

    def _find_loop_end(self, code, start):
        """Return the position of the ']' matching the '[' at start."""
        depth = 0
        i = start + 1
        while i < len(code):
            cmd = code[i]
            if cmd == '[':
                depth += 1
            elif cmd == ']':
                if depth == 0:
                    return i
                depth -= 1
            i += 1
        logger.warning("Unmatched '[' at position %d", start)
        raise MalformedProgram("Unmatched '['", start)

    def _find_loop_start(self, code, end):
        """Return the position of the '[' matching the ']' at end."""
        depth = 0
        i = end - 1
        while i >= 0:
            cmd = code[i]
            if cmd == ']':
                depth += 1
            elif cmd == '[':
                if depth == 0:
                    return i
                depth -= 1
            i -= 1
        logger.warning("Unmatched ']' at position %d", end)
        raise MalformedProgram("Unmatched ']'", end)
