from .joltage import max_joltage, parse_banks, solve, total_joltage

__all__ = ["max_joltage", "parse_banks", "solve", "total_joltage"]
