"""
Identifier generation for new entities.
"""
from abc import ABC, abstractmethod

import ulid


class IdGenerator(ABC):
    """Produces a globally unique identifier string on demand."""

    @abstractmethod
    def generate_id(self) -> str:
        pass


class UlidGenerator(IdGenerator):
    """
    Generate ULID strings.

    ULIDs are 26-character Crockford Base32 values; their lexical order follows
    creation time, which custom option listing relies on.
    """

    def generate_id(self) -> str:
        return str(ulid.new())
