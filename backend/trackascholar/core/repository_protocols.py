"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - File IO is reached only through RegistryStorage

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Synchronous: the registry is single-threaded and load/save are all-or-nothing
"""

from typing import Protocol

from trackascholar.core.registry import ApplicantRegistry


class RegistryStorage(Protocol):
    """Contract for registry persistence, implemented by infrastructure."""
    def read_registry(self) -> ApplicantRegistry | None: ...
    def save_registry(self, registry: ApplicantRegistry) -> None: ...
