# AoC 2025 - Puzzle Solvers
# Created:      2026-10-19
# Modified:     2026-10-19

__version__ = "0.1.0"
