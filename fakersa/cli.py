"""Command line front end.

Usage:
    fake-rsa encrypt "2024000000secretLT-1-abc"              # default key ring
    fake-rsa encrypt hello -k 1 -k 2 -k 3
    fake-rsa decrypt 2058E46050368D2F -k 1 -k 2 -k 3
    fake-rsa form --username 2024000000 --password secret --lt LT-1 --execution e1s1
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .cipher.cascade import decrypt_string, encrypt_string
from .cipher.errors import CipherError
from .config import load_settings
from .form import build_login_form

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fake-rsa",
        description="Encode text the way the legacy SSO login page does before submitting it.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def _add_keys(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "-k", "--key", dest="keys", action="append", default=None, metavar="KEY",
            help="Key-ring entry, repeatable and order-sensitive (default: FAKERSA_KEY_RING)",
        )

    enc = sub.add_parser("encrypt", help="Encrypt a string to uppercase hex")
    enc.add_argument("text")
    _add_keys(enc)

    dec = sub.add_parser("decrypt", help="Decrypt a hex string produced by encrypt")
    dec.add_argument("ciphertext")
    _add_keys(dec)

    form = sub.add_parser("form", help="Print the login form fields as JSON")
    form.add_argument("--username", required=True)
    form.add_argument("--password", required=True)
    form.add_argument("--lt", required=True, help="One-time login ticket scraped from the page")
    form.add_argument("--execution", required=True)
    form.add_argument("--encoded", action="store_true", help="Print the urlencoded body instead of JSON")
    _add_keys(form)

    return parser


def _emit(text: str) -> None:
    # Decrypted text can hold lone surrogates, which no stdout codec accepts
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    print(text.encode(encoding, "backslashreplace").decode(encoding))


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValidationError as exc:
        print(f"error: invalid settings: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    ring = args.keys if args.keys else settings.key_ring
    try:
        if args.command == "encrypt":
            print(encrypt_string(args.text, ring))
        elif args.command == "decrypt":
            _emit(decrypt_string(args.ciphertext, ring))
        else:
            login_form = build_login_form(args.username, args.password, args.lt, args.execution, ring)
            if args.encoded:
                print(login_form.encode())
            else:
                print(json.dumps(login_form.to_form_data(), indent=2))
    except (CipherError, ValidationError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
