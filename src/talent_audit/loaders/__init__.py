"""Snapshot loaders.

Key modules:
    - rounds: Load and dump round snapshots (JSON/YAML)
"""

from talent_audit.loaders.rounds import load_round, parse_round, dump_round

__all__ = ["load_round", "parse_round", "dump_round"]
