#!/usr/bin/env python3
"""多签地址工具: 单公钥地址、多签地址派生、校验、找回公钥顺序、生成测试公钥。"""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import logging
from pathlib import Path

from duoqian.address import EventLog, check_multisig_address_eq, derive_multisig_address
from duoqian.keygen import generate_public_key
from duoqian.keys import SCHEME_BY_NAME, address_to_hex, key_to_address, parse_address
from duoqian.order import order_pks


def parse_key(raw: str) -> bytes:
    """0x 开头按 hex 解析，否则按 base64 (钱包导出的 flag+公钥)。"""
    txt = raw.strip()
    if txt.lower().startswith("0x"):
        try:
            return bytes.fromhex(txt[2:])
        except ValueError as e:
            raise ValueError(f"key is not hex: {raw}") from e
    try:
        return base64.b64decode(txt, validate=True)
    except binascii.Error as e:
        raise ValueError(f"key is neither 0x-hex nor base64: {raw}") from e


def load_keys_file(path: str) -> tuple[list[bytes], list[int]]:
    try:
        with open(Path(path).expanduser(), "r", encoding="utf-8") as f:
            items = json.load(f)
    except OSError as e:
        raise ValueError(f"cannot read {path}: {e.strerror or e}") from e
    if not isinstance(items, list):
        raise ValueError(f"{path} must contain a JSON list")
    pks = []
    weights = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"{path}[{i}] must be an object")
        if not isinstance(item.get("public_key"), str):
            raise ValueError(f"{path}[{i}] missing 'public_key' string")
        weight = item.get("weight", 1)
        # bool 是 int 的子类
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise ValueError(f"{path}[{i}] weight must be an integer, got {weight!r}")
        pks.append(parse_key(item["public_key"]))
        weights.append(weight)
    return pks, weights


def collect_spec(args: argparse.Namespace) -> tuple[list[bytes], list[int]]:
    pks: list[bytes] = []
    weights: list[int] = []
    if args.keys_file:
        pks, weights = load_keys_file(args.keys_file)
    pks += [parse_key(k) for k in args.key or []]
    weights += args.weight or []
    return pks, weights


def cmd_key_address(args: argparse.Namespace) -> int:
    try:
        address = key_to_address(parse_key(args.key), SCHEME_BY_NAME[args.scheme])
    except ValueError as e:
        print(f"INVALID: {e}")
        return 1
    print(address_to_hex(address))
    return 0


def cmd_derive(args: argparse.Namespace) -> int:
    log = EventLog()
    try:
        pks, weights = collect_spec(args)
        address = derive_multisig_address(pks, weights, args.threshold, sink=log)
    except ValueError as e:
        print(f"INVALID: {e}")
        return 1
    if args.json:
        print(json.dumps(log.events[0].to_dict(), indent=2))
        return 0
    print(address_to_hex(address))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    try:
        pks, weights = collect_spec(args)
        ok = check_multisig_address_eq(pks, weights, args.threshold, parse_address(args.address))
    except ValueError as e:
        print(f"INVALID: {e}")
        return 1
    print("MATCH" if ok else "MISMATCH")
    return 0 if ok else 1


def cmd_order(args: argparse.Namespace) -> int:
    try:
        pks, weights = collect_spec(args)
        ordered = order_pks(parse_address(args.address), pks, weights, args.threshold, max_keys=args.max_keys)
    except ValueError as e:
        print(f"INVALID: {e}")
        return 1
    for pk in ordered:
        print("0x" + pk.hex())
    return 0


def cmd_keygen(args: argparse.Namespace) -> int:
    scheme = SCHEME_BY_NAME[args.scheme]
    keys = [generate_public_key(scheme) for _ in range(args.count)]
    if args.json:
        records = [{"scheme": args.scheme, "public_key": "0x" + pk.hex(), "weight": 1} for pk in keys]
        print(json.dumps(records, indent=2))
        return 0
    for pk in keys:
        print("0x" + pk.hex())
    return 0


def add_spec_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--key", action="append", help="公钥 (0x-hex 或 base64)，可重复，按顺序")
    p.add_argument("--weight", action="append", type=int, help="权重，可重复，与 --key 一一对应")
    p.add_argument("--threshold", type=int, required=True)
    p.add_argument("--keys-file", default="", help='JSON: [{"public_key": ..., "weight": ...}]')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="duoqian", description="Multisig address tool")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    k = sub.add_parser("key-address", help="单公钥地址")
    k.add_argument("--scheme", choices=sorted(SCHEME_BY_NAME), required=True)
    k.add_argument("--key", required=True)
    k.set_defaults(func=cmd_key_address)

    d = sub.add_parser("derive", help="派生多签地址")
    add_spec_arguments(d)
    d.add_argument("--json", action="store_true", help="print the event record")
    d.set_defaults(func=cmd_derive)

    c = sub.add_parser("check", help="校验多签地址")
    add_spec_arguments(c)
    c.add_argument("--address", required=True)
    c.set_defaults(func=cmd_check)

    o = sub.add_parser("order", help="找回公钥顺序")
    add_spec_arguments(o)
    o.add_argument("--address", required=True)
    o.add_argument("--max-keys", type=int, default=None, help="default: $DUOQIAN_MAX_KEYS or 10")
    o.set_defaults(func=cmd_order)

    g = sub.add_parser("keygen", help="生成测试公钥")
    g.add_argument("--scheme", choices=sorted(SCHEME_BY_NAME), required=True)
    g.add_argument("--count", type=int, default=1)
    g.add_argument("--json", action="store_true")
    g.set_defaults(func=cmd_keygen)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
