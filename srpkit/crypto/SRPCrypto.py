#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from Crypto.Util.number import bytes_to_long

from srpkit.crypto.SRPConfiguration import SRPConfiguration
from srpkit.crypto.SRPKey import SRPKey
from srpkit.utils.ConfigLoader import ConfigLoader
from srpkit.utils.Logger import Logger


def pad(data: bytes, size: int) -> bytes:
    """
    Left-pad ``data`` with zero bytes to ``size``.

    Input that is already ``size`` bytes or wider is returned unchanged,
    it is never truncated. A non-positive size is a no-op.
    """
    pad_size = size - len(data)
    if pad_size <= 0:
        return data
    return b"\x00" * pad_size + data


def _raw(value) -> bytes:
    """Raw bytes of an SRPKey or a bytes-like value."""
    if isinstance(value, SRPKey):
        return value.data
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected SRPKey or bytes, got {type(value).__name__}")


class SRPCrypto:
    """
    Shared SRP-6a computations used by both client and server.

    Everything here is a pure function of its arguments and the
    configuration (N, g, hash). Session state, exponentiation and the
    ordering of handshake steps belong to the caller.

    The class provides:
        * u = H(PAD(A) | PAD(B))
        * Client proof M1
        * Server proof M2
        * Session key K = H(S) and multiplier k = H(N | PAD(g))

    Caller obligations not enforced here: reject u == 0, reject
    A % N == 0 / B % N == 0, and verify M1 before answering with M2.
    """

    def __init__(self, configuration: SRPConfiguration | None = None, strict_padding: bool | None = None) -> None:
        self.configuration = configuration or SRPConfiguration.from_config()

        if strict_padding is None:
            crypto = ConfigLoader.get_config().get("crypto", {})
            strict_padding = bool(crypto.get("strict_padding", True))
        self.strict_padding = strict_padding

    # ======================================================================
    # Hash helpers
    # ======================================================================

    def hash(self, *parts: bytes) -> bytes:
        """
        Hash the concatenation of ``parts`` with the configured strategy.

        Returns:
            bytes: raw digest.
        """
        for part in parts:
            if not isinstance(part, (bytes, bytearray, memoryview)):
                raise TypeError(f"hash(): pass {type(part).__name__} values as bytes explicitly")
        return self.configuration.hash_function.hash(b"".join(bytes(p) for p in parts))

    @staticmethod
    def xor_digests(left: bytes, right: bytes) -> bytes:
        """Bytewise XOR of two digests of identical length."""
        if len(left) != len(right):
            Logger.error(
                f"[SRP] digest length mismatch: {len(left)} != {len(right)} "
                "(hash function does not produce fixed-size output)"
            )
            raise ValueError(f"Cannot XOR digests of different length ({len(left)} != {len(right)})")
        return bytes(x ^ y for x, y in zip(left, right))

    def _pad_key(self, key: bytes, label: str) -> bytes:
        size = self.configuration.size
        if len(key) > size:
            msg = f"[SRP] {label} is {len(key)} bytes, wider than N ({size} bytes)"
            if self.strict_padding:
                Logger.error(msg)
                raise ValueError(f"{label} is wider than the group modulus ({len(key)} > {size} bytes)")
            Logger.warning(msg)
        return pad(key, size)

    # ======================================================================
    # Scrambler u
    # ======================================================================

    def calculate_u(self, client_public_key, server_public_key) -> int:
        """
        Compute u = H(PAD(A) | PAD(B)) as a big-endian integer.

        Both keys are zero-prefixed to the byte length of N so that values
        with leading zero bytes still occupy fixed positions.
        """
        a_bytes = self._pad_key(_raw(client_public_key), "A")
        b_bytes = self._pad_key(_raw(server_public_key), "B")

        u_value = bytes_to_long(self.hash(a_bytes, b_bytes))
        if u_value == 0:
            Logger.warning("[SRP] u == 0, caller must abort the handshake")
        Logger.debug(f"[SRP] u={u_value:X}")

        return u_value

    # ======================================================================
    # Proof values M1 and M2
    # ======================================================================

    def calculate_client_verification(
        self,
        username: str,
        salt: bytes,
        client_public_key,
        server_public_key,
        shared_secret,
    ) -> bytes:
        """
        Compute the client proof M1.

        M1 = H( H(N) xor H(g), H(I), s, A, B, H(S) )

        Args:
            username (str): Identity I, hashed as UTF-8.
            salt (bytes): Salt from the user's registration.
            client_public_key: A (SRPKey or bytes), unpadded.
            server_public_key: B (SRPKey or bytes), unpadded.
            shared_secret: Raw S bytes (SRPKey or bytes).

        Returns:
            bytes: one digest.
        """
        return self.calculate_client_verification_from_hash(
            username,
            salt,
            client_public_key,
            server_public_key,
            self.hash_shared_secret(shared_secret),
        )

    def calculate_client_verification_from_hash(
        self,
        username: str,
        salt: bytes,
        client_public_key,
        server_public_key,
        hash_shared_secret: bytes,
    ) -> bytes:
        """Same as calculate_client_verification with H(S) already computed."""
        cfg = self.configuration

        xor_ng = self.xor_digests(self.hash(cfg.N_bytes), self.hash(cfg.g_bytes))
        hash_i = self.hash(username.encode("utf-8"))

        m1 = self.hash(
            xor_ng,
            hash_i,
            _raw(salt),
            _raw(client_public_key),
            _raw(server_public_key),
            _raw(hash_shared_secret),
        )
        Logger.debug(f"[SRP] M1={m1.hex().upper()} I={username}")
        return m1

    def calculate_server_verification(self, client_public_key, client_verification: bytes, shared_secret) -> bytes:
        """
        Compute the server proof M2 = H(A, M1, S).

        ``shared_secret`` is hashed verbatim; RFC 5054 style peers pass the
        session key K here.
        """
        m2 = self.hash(_raw(client_public_key), _raw(client_verification), _raw(shared_secret))
        Logger.debug(f"[SRP] M2={m2.hex().upper()}")
        return m2

    # ======================================================================
    # Derived values
    # ======================================================================

    def hash_shared_secret(self, shared_secret) -> bytes:
        """Session key K = H(S)."""
        return self.hash(_raw(shared_secret))

    def calculate_multiplier(self) -> int:
        """SRP-6a multiplier k = H(N | PAD(g))."""
        cfg = self.configuration
        return bytes_to_long(self.hash(cfg.N_bytes, pad(cfg.g_bytes, cfg.size)))
