from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

log = logging.getLogger(__name__)

WILDCARD = "*"
EXCEPTION_MARK = "!"
COMMENT_MARK = "//"


@dataclass(frozen=True)
class RuleLine:
    """One rule of the dataset, labels stored TLD first."""
    labels: Tuple[str, ...]
    is_exception: bool = False

    @property
    def is_wildcard(self) -> bool:
        return self.labels[-1] == WILDCARD

    def __str__(self) -> str:
        name = ".".join(reversed(self.labels))
        return EXCEPTION_MARK + name if self.is_exception else name


class RuleNode:
    __slots__ = ("children", "terminal", "is_exception", "is_wildcard")

    def __init__(self, is_wildcard: bool = False):
        self.children: Dict[str, RuleNode] = {}
        self.terminal = False
        self.is_exception = False
        self.is_wildcard = is_wildcard

    def _freeze(self) -> None:
        for child in self.children.values():
            child._freeze()
        self.children = MappingProxyType(self.children)


class RuleTree:
    """Suffix rules keyed label by label, TLD first.

    Built once by parse(); child mappings are read-only afterwards.
    """

    def __init__(self, root: RuleNode, count: int):
        self.root = root
        self._count = count

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, rule: object) -> bool:
        line = parse_rule_line(rule) if isinstance(rule, str) else None
        if line is None:
            return False
        node = self.root
        for label in line.labels:
            node = node.children.get(label)
            if node is None:
                return False
        return node.terminal and node.is_exception == line.is_exception

    def __repr__(self) -> str:
        return f"RuleTree(rules={self._count})"


def parse_rule_line(line: str) -> Optional[RuleLine]:
    """Parse one dataset line; None for blanks, comments and malformed rules."""
    fields = line.split()
    if not fields or fields[0].startswith(COMMENT_MARK):
        return None
    rule = fields[0].lower()
    is_exception = rule.startswith(EXCEPTION_MARK)
    if is_exception:
        rule = rule[1:]
    labels = rule.split(".")
    if not all(labels):
        log.debug("Skipping rule with empty label: %r", fields[0])
        return None
    if is_exception and labels[0] == WILDCARD:
        log.debug("Skipping wildcard exception rule: %r", fields[0])
        return None
    return RuleLine(labels=tuple(reversed(labels)), is_exception=is_exception)


def iter_rule_lines(text: str) -> Iterator[RuleLine]:
    for line in text.splitlines():
        rule = parse_rule_line(line)
        if rule is not None:
            yield rule


def _insert(root: RuleNode, rule: RuleLine) -> bool:
    """Insert a rule; returns False when the same rule was already present."""
    node = root
    for label in rule.labels:
        child = node.children.get(label)
        if child is None:
            child = RuleNode(is_wildcard=label == WILDCARD)
            node.children[label] = child
        node = child
    if node.terminal and node.is_exception == rule.is_exception:
        return False
    node.terminal = True
    node.is_exception = rule.is_exception
    return True


def parse(text: str) -> RuleTree:
    """Parse dataset text into a RuleTree.

    Anything that is not usable text gives an empty tree, under which every
    host falls back to the implicit single-label rule.
    """
    root = RuleNode()
    count = 0
    if not isinstance(text, str):
        log.warning("Rule dataset is not text (%s); using an empty rule tree", type(text).__name__)
        root._freeze()
        return RuleTree(root, 0)

    lines = 0
    for rule in iter_rule_lines(text):
        lines += 1
        if _insert(root, rule):
            count += 1
    root._freeze()
    if count == 0:
        log.warning("Rule dataset contained no usable rules")
    log.info("Parsed %d suffix rules (%d duplicates)", count, lines - count)
    return RuleTree(root, count)


def load_rules(path: str | Path) -> RuleTree:
    """Read a UTF-8 public suffix file from disk and parse it."""
    p = Path(path)
    log.info("Loading suffix rules from %s", p)
    text = p.read_text(encoding="utf-8")
    return parse(text)
