#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse

from srpkit.utils.ConfigLoader import ConfigLoader

# GLOBALS
config = ConfigLoader.get_config()


def _hex_bytes(value: str) -> bytes:
    try:
        return bytes.fromhex("".join(value.split()))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {value!r}")


def parse_args(argv=None):
    crypto = config.get("crypto", {})

    parser = argparse.ArgumentParser(description=f"{config.get('tool_name', 'SRPKit')} vector calculator")
    parser.add_argument("-G", "--group", type=str, default=crypto.get("group"), help="Group name from crypto.groups")
    parser.add_argument("-H", "--hash", type=str, default=crypto.get("hash"), help="hashlib algorithm name")
    parser.add_argument("-I", "--username", type=str, required=True, help="Identity I")
    parser.add_argument("-s", "--salt", type=_hex_bytes, required=True, help="Salt (hex)")
    parser.add_argument("-A", "--client-key", type=_hex_bytes, required=True, help="Client public key A (hex)")
    parser.add_argument("-B", "--server-key", type=_hex_bytes, required=True, help="Server public key B (hex)")
    parser.add_argument("-S", "--secret", type=_hex_bytes, required=True, help="Shared secret S (hex)")
    parser.add_argument("--lenient", action="store_true", help="Allow keys wider than N when deriving u")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging output")

    return parser.parse_args(argv)
