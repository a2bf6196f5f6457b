"""Stable boundary for front ends.

Speaks JSON-friendly structures only:
- state snapshots
- move encode/decode
- whole-turn apply producing diffs
"""

from .facade import PawnsEngine
from .serde import move_to_dict, dict_to_move, snapshot, move_to_uci

__all__ = ["PawnsEngine", "move_to_dict", "dict_to_move", "snapshot", "move_to_uci"]
