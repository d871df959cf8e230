"""External collaborator integrations.

Key modules:
    - round_store: In-memory and directory-backed round stores
"""

from talent_audit.integrations.round_store import (
    InMemoryRoundStore,
    DirectoryRoundStore,
    build_round,
)

__all__ = ["InMemoryRoundStore", "DirectoryRoundStore", "build_round"]
