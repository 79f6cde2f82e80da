#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from srpkit.crypto.SRPConfiguration import SRPConfiguration
from srpkit.crypto.SRPCrypto import SRPCrypto
from srpkit.crypto.SRPKey import SRPKey
from srpkit.utils.CliArgs import parse_args
from srpkit.utils.Logger import Logger


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.verbose:
        Logger.set_level("ALL")

    try:
        configuration = SRPConfiguration.from_group(args.group, args.hash)
        crypto = SRPCrypto(configuration, strict_padding=not args.lenient)

        A = SRPKey(args.client_key)
        B = SRPKey(args.server_key)
        S = SRPKey(args.secret)

        u_value = crypto.calculate_u(A, B)
        K = crypto.hash_shared_secret(S)
        M1 = crypto.calculate_client_verification(args.username, args.salt, A, B, S)
        M2 = crypto.calculate_server_verification(A, M1, S)
    except ValueError as e:
        Logger.error(str(e))
        return 1

    Logger.info(f"group={args.group} hash={configuration.hash_function.name} N_len={configuration.size}")
    Logger.success(f"u:  {u_value:X}")
    Logger.success(f"K:  {K.hex().upper()}")
    Logger.success(f"M1: {M1.hex().upper()}")
    Logger.success(f"M2: {M2.hex().upper()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
