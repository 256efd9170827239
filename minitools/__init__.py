"""Small command-line tools: metro trips, letter palindromes, operator puzzles, clinic booking, bank deposits and BMP filters."""

__version__ = "0.1.0"