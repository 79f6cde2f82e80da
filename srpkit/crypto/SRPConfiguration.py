#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass, field

from Crypto.Util.number import bytes_to_long, long_to_bytes

from srpkit.crypto.HashFunction import HashFunction
from srpkit.utils.ConfigLoader import ConfigLoader


@dataclass(frozen=True)
class SRPConfiguration:
    """
    Group parameters (N, g) and the hash strategy shared by both peers.

    N and g are agreed out-of-band; primality and generator validity are
    trusted, not checked. ``size`` is the byte length of N and is the
    width every padded value is stretched to.
    """

    N: int
    g: int
    hash_function: HashFunction = field(default_factory=lambda: HashFunction("sha256"))

    def __post_init__(self) -> None:
        for name in ("N", "g"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value <= 0:
                raise ValueError(f"{name} must be a positive integer")

    @property
    def N_bytes(self) -> bytes:
        return long_to_bytes(self.N)

    @property
    def g_bytes(self) -> bytes:
        return long_to_bytes(self.g)

    @property
    def size(self) -> int:
        return len(self.N_bytes)

    # ======================================================================
    # Construction from the configuration file
    # ======================================================================

    @staticmethod
    def available_groups() -> list[str]:
        crypto = ConfigLoader.get_config().get("crypto", {})
        return sorted(crypto.get("groups", {}))

    @classmethod
    def from_group(cls, group: str, hash_name: str | None = None) -> "SRPConfiguration":
        """
        Build a configuration from a group declared under crypto.groups.

        Args:
            group (str): Group name, e.g. "rfc5054_2048".
            hash_name (str): hashlib algorithm; defaults to crypto.hash.
        """
        crypto = ConfigLoader.get_config().get("crypto", {})
        groups = crypto.get("groups", {})

        if group not in groups:
            raise ValueError(
                f"Unknown SRP group {group!r}; available: {', '.join(sorted(groups)) or 'none'}"
            )

        entry = groups[group]
        try:
            # YAML folded scalars leave spaces between the hex lines
            n_hex = "".join(str(entry["N"]).split())
            N = bytes_to_long(bytes.fromhex(n_hex))
            g = int(entry["g"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed SRP group {group!r}: {e}")

        return cls(N=N, g=g, hash_function=HashFunction(hash_name or crypto.get("hash", "sha256")))

    @classmethod
    def from_config(cls) -> "SRPConfiguration":
        """Build the default configuration (crypto.group + crypto.hash)."""
        crypto = ConfigLoader.get_config().get("crypto", {})
        return cls.from_group(crypto.get("group", "rfc5054_2048"), crypto.get("hash"))
