from .ranges import is_fresh, merge_ranges, parse_inventory, solve

__all__ = ["is_fresh", "merge_ranges", "parse_inventory", "solve"]
