from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, List, Optional

from .matcher import MatchResult, match
from .normalize import host_labels, normalize_host
from .rules import RuleTree, load_rules, parse

log = logging.getLogger(__name__)


def _is_ipv4(labels: List[str]) -> bool:
    if len(labels) != 4:
        return False
    return all(p.isascii() and p.isdigit() and int(p) <= 255 for p in labels)


class Resolver:
    """Answers domain questions about hosts against one shared RuleTree.

    Only str input is looked at; any other value is treated as an invalid
    host (False, None or "" depending on the call). Nothing here raises on
    bad input.
    """

    def __init__(self, tree: RuleTree):
        self._tree = tree
        if not tree:
            log.warning("Resolver created with an empty rule tree; only the default rule applies")

    @classmethod
    def from_text(cls, text: str) -> "Resolver":
        return cls(parse(text))

    @classmethod
    def from_file(cls, path: str | Path) -> "Resolver":
        return cls(load_rules(path))

    @property
    def rules(self) -> RuleTree:
        return self._tree

    def _labels(self, host: Any) -> Optional[List[str]]:
        if not isinstance(host, str):
            return None
        return host_labels(normalize_host(host))

    def _valid_labels(self, host: Any) -> Optional[List[str]]:
        labels = self._labels(host)
        if not labels or len(labels) < 2:
            return None
        if not all(labels) or _is_ipv4(labels):
            return None
        return labels

    def match(self, host: Any) -> Optional[MatchResult]:
        labels = self._labels(host)
        if not labels:
            return None
        return match(self._tree, labels[::-1])

    def is_valid(self, host: Any) -> bool:
        """True for dotted host names; False for IPs, empty labels, non-strings."""
        return self._valid_labels(host) is not None

    def tld_exists(self, host: Any) -> bool:
        """True when some explicit rule matches the end of the host."""
        result = self.match(host)
        return result is not None and not result.is_default

    def get_domain(self, host: Any) -> Optional[str]:
        labels = self._valid_labels(host)
        if labels is None:
            return None
        n = match(self._tree, labels[::-1]).effective_suffix_length
        if len(labels) < n + 1:
            return None
        return ".".join(labels[-(n + 1):])

    def get_subdomain(self, host: Any) -> str:
        domain = self.get_domain(host)
        if domain is None:
            return ""
        labels = host_labels(normalize_host(host))
        return ".".join(labels[:len(labels) - len(host_labels(domain))])
