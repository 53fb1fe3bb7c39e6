from __future__ import annotations


class CipherError(ValueError):
    """Base class for validation failures raised by the cipher core."""


class InvalidLength(CipherError):
    """A fixed-size operation received a wrongly sized bit vector."""


class InvalidCharacter(CipherError):
    """A character cannot be represented in the 16-bit text encoding."""


class InvalidPermutationTable(CipherError):
    """A permutation table references a source index outside the input."""
