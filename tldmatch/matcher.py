from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .rules import WILDCARD, RuleTree


@dataclass(frozen=True)
class MatchResult:
    suffix_label_count: int
    is_exception: bool = False
    is_default: bool = False

    @property
    def effective_suffix_length(self) -> int:
        """Number of trailing labels that form the public suffix."""
        if self.is_exception:
            return self.suffix_label_count - 1
        return self.suffix_label_count


DEFAULT_MATCH = MatchResult(suffix_label_count=1, is_default=True)


def match(tree: RuleTree, labels_reversed: Sequence[str]) -> MatchResult:
    """
    Walk the tree along the host labels (TLD first).
    Literal children win over the wildcard; an exception node ends the walk.
    The result length is the depth of the deepest rule terminal passed,
    or the implicit "*" rule when none was.
    """
    node = tree.root
    best = 0
    for depth, label in enumerate(labels_reversed, start=1):
        child = node.children.get(label)
        if child is None:
            child = node.children.get(WILDCARD)
            if child is None:
                break
        node = child
        if node.is_exception:
            return MatchResult(suffix_label_count=depth, is_exception=True)
        if node.terminal:
            best = depth
    if best == 0:
        return DEFAULT_MATCH
    return MatchResult(suffix_label_count=best)
