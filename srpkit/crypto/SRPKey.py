#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass

from Crypto.Util.number import bytes_to_long, long_to_bytes


@dataclass(frozen=True)
class SRPKey:
    """
    Wrapper for the public and derived values passed between SRP peers.

    The raw big-endian bytes are the canonical form: they are what goes
    into every hash. The integer view is computed on each access and is
    never cached.
    """

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"SRPKey expects bytes, got {type(self.data).__name__}; "
                "use SRPKey.from_number() for integers"
            )
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_number(cls, number: int) -> "SRPKey":
        """Build a key from a non-negative integer (minimal big-endian bytes)."""
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"SRPKey.from_number expects int, got {type(number).__name__}")
        if number < 0:
            raise ValueError("SRP values are non-negative integers")
        return cls(long_to_bytes(number))

    @property
    def number(self) -> int:
        """
        Big-endian integer value of the key bytes.

        Raises:
            ValueError: the key holds no bytes, so it is not a number.
        """
        if not self.data:
            raise ValueError("Empty SRP key has no numeric value")
        return bytes_to_long(self.data)

    def hex(self) -> str:
        return self.data.hex().upper()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)
