#!/usr/bin/env python3
"""Verifica as chaves Mollom configuradas e mostra a lista de servidores.

Uso:
    MOLLOM_PUBLIC_KEY=... MOLLOM_PRIVATE_KEY=... python scripts/verify_mollom_keys.py
    python scripts/verify_mollom_keys.py --servers http://xmlrpc1.mollom.com

Sai com código 0 se as chaves forem aceitas, 1 caso contrário.
"""

from __future__ import annotations

import argparse
import sys

from mollom.bootstrap import configure_client_logging, create_mollom_client
from mollom.errors import MollomError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--servers",
        nargs="*",
        default=None,
        help="Lista de servidores a usar no lugar de getServerList",
    )
    args = parser.parse_args(argv)

    configure_client_logging()
    try:
        client = create_mollom_client()
        if args.servers:
            client.server_list(args.servers)
        servers = client.server_list()
        valid = client.verify_key()
    except MollomError as exc:
        print(f"erro: {exc}", file=sys.stderr)
        return 1

    for server in servers:
        print(server)
    print("chaves válidas" if valid else "chaves rejeitadas")
    return 0 if valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
