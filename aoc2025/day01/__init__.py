from .dial import parse_rotations, solve, turn_knob

__all__ = ["parse_rotations", "solve", "turn_knob"]
