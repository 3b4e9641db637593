"""Pattern definitions: built-ins and JSON pattern files."""

from .builtin import DIAMOND_BLOCK, IRON_BLOCK, T_POSE_OFFSETS, t_pose_pattern
from .loader import PatternDocument, PatternFileError, load_pattern_file, load_pattern_text

__all__ = [
    "DIAMOND_BLOCK",
    "IRON_BLOCK",
    "PatternDocument",
    "PatternFileError",
    "T_POSE_OFFSETS",
    "load_pattern_file",
    "load_pattern_text",
    "t_pose_pattern",
]
