from .repeats import is_doubled, is_repeated, parse_intervals, solve

__all__ = ["is_doubled", "is_repeated", "parse_intervals", "solve"]
