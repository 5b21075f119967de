from __future__ import annotations
import argparse
import logging
import sys
import yaml
from typing import Iterable, List, Optional

from .config import Config, ConfigError
from .logging_setup import setup_logging
from .normalize import normalize_host
from .resolver import Resolver

ACTIONS = ("domain", "subdomain", "valid", "exists", "normalize")


def _format(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _answer(resolver: Resolver, action: str, host: str):
    if action == "domain":
        return resolver.get_domain(host)
    if action == "subdomain":
        return resolver.get_subdomain(host)
    if action == "valid":
        return resolver.is_valid(host)
    if action == "exists":
        return resolver.tld_exists(host)
    return normalize_host(host)


def _read_hosts(stream) -> Iterable[str]:
    for line in stream:
        line = line.strip()
        if line:
            yield line


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tldmatch", description="Resolve registrable domains against a public suffix list")
    ap.add_argument("--config", help="Path to config.yaml")
    ap.add_argument("--rules", help="Path to the public suffix list (overrides rules_file)")
    ap.add_argument("action", choices=ACTIONS)
    ap.add_argument("hosts", nargs="*", help="Hosts or URLs; read from stdin when omitted")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Config.load(args.config) if args.config else Config()
    except (OSError, ConfigError, yaml.YAMLError) as e:
        print(f"[tldmatch] error: {e}", file=sys.stderr)
        raise SystemExit(2)

    setup_logging(cfg.data)
    log = logging.getLogger(__name__)

    rules_path = args.rules or cfg.rules_file
    if not rules_path:
        print("[tldmatch] error: no rules file given (--rules or rules_file in config)", file=sys.stderr)
        raise SystemExit(2)
    try:
        resolver = Resolver.from_file(rules_path)
    except OSError as e:
        print(f"[tldmatch] error: cannot read rules: {e}", file=sys.stderr)
        raise SystemExit(2)
    log.debug("Loaded %d rules from %s", len(resolver.rules), rules_path)

    hosts = args.hosts or _read_hosts(sys.stdin)
    for host in hosts:
        print(f"{host}\t{_format(_answer(resolver, args.action, host))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
