#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import hashlib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HashFunction:
    """
    Hash strategy injected into every SRP computation.

    Wraps a fixed-output hashlib algorithm by name. Any object exposing
    ``name``, ``digest_size`` and ``hash(data) -> bytes`` can be used in
    its place; one strategy must be used for a whole handshake.
    """

    name: str
    digest_size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            template = hashlib.new(self.name)
        except (ValueError, TypeError):
            raise ValueError(f"Unsupported hash algorithm: {self.name!r}")

        # shake_* and friends have no fixed digest length
        if template.digest_size == 0:
            raise ValueError(f"Hash algorithm {self.name!r} has no fixed digest size")

        object.__setattr__(self, "digest_size", template.digest_size)

    def hash(self, data: bytes) -> bytes:
        """Return the digest of ``data``."""
        return hashlib.new(self.name, data).digest()
