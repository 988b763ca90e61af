"""Mini README: Prefix tree powering description auto-suggestions.

Structure:
    * DescriptionIndex - insert descriptions and list those sharing a prefix.

The index only answers prefix questions; substring search over transactions
is a linear scan in the ledger store. Entries are never removed, so the
descriptions of deleted transactions remain suggestible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    terminal: bool = False


class DescriptionIndex:
    """Case-sensitive prefix index over previously used descriptions."""

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._size = 0

    def insert(self, text: str) -> None:
        """Record ``text``; inserting a known description is a no-op."""

        if not text:
            return
        node = self._root
        for character in text:
            node = node.children.setdefault(character, _TrieNode())
        if not node.terminal:
            node.terminal = True
            self._size += 1
            LOGGER.debug("Indexed description %r", text)

    def suggestions(self, prefix: str) -> List[str]:
        """Return every indexed description starting with ``prefix``.

        Results follow child insertion order rather than alphabetical order.
        A prefix that was never walked yields an empty list.
        """

        node = self._find(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def _find(self, prefix: str) -> Optional[_TrieNode]:
        node = self._root
        for character in prefix:
            child = node.children.get(character)
            if child is None:
                return None
            node = child
        return node

    def _walk(self, node: _TrieNode, path: str) -> Iterator[str]:
        # Pre-order walk in child insertion order.
        stack = [(node, path)]
        while stack:
            current, text = stack.pop()
            if current.terminal:
                yield text
            for character, child in reversed(list(current.children.items())):
                stack.append((child, text + character))

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str) or not text:
            return False
        node = self._find(text)
        return node is not None and node.terminal

    def __len__(self) -> int:
        return self._size
