from .worksheet import Problem, grand_total, parse_worksheet, solve

__all__ = ["Problem", "grand_total", "parse_worksheet", "solve"]
