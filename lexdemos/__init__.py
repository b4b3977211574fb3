"""Tokenizer-driven programs: Brainfuck, a calculator, ASCII words, word positions and JSON."""

__version__ = "0.15.0"
__all__ = ["ascii_words", "brainfuck", "calculator", "jsonparse", "positions"]