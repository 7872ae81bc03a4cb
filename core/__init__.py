"""Helpers for loading and running Brainfuck programs."""
