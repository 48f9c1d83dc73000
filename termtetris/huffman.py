"""Huffman codes for the characters of a word."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass
class _Node:
    weight: int
    char: str | None = None
    left: "_Node | None" = None
    right: "_Node | None" = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """A Huffman tree over the characters of ``text``.

    Characters are taken in order of first appearance; the two lightest
    subtrees are merged repeatedly, the lighter one becoming the left child
    (code digit 0). A merged subtree goes after others of the same weight.
    """

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("cannot build a Huffman tree from empty text")
        pending = sorted(
            (_Node(weight, char) for char, weight in Counter(text).items()),
            key=lambda node: node.weight,
        )
        while len(pending) > 1:
            left, right, *rest = pending
            rest.append(_Node(left.weight + right.weight, None, left, right))
            pending = sorted(rest, key=lambda node: node.weight)
        self._root = pending[0]

    def _leaves(self) -> Iterator[tuple[_Node, str]]:
        stack: list[tuple[_Node, str]] = [(self._root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                yield node, code
                continue
            if node.right is not None:
                stack.append((node.right, code + "1"))
            if node.left is not None:
                stack.append((node.left, code + "0"))

    def codes(self) -> dict[str, str]:
        """Each character's code, in tree order from left to right."""
        return {node.char: code for node, code in self._leaves() if node.char is not None}

    def report(self) -> list[str]:
        """One line per character: the character, its weight and its code."""
        return [
            f"{node.char} weight:{node.weight} huffmancode:{code}"
            for node, code in self._leaves()
        ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Huffman codes of a word given, or else read from input."""
    parser = argparse.ArgumentParser(description="Show Huffman codes of a word.")
    parser.add_argument("word", nargs="?", help="the word to code; read from input if left out")
    args = parser.parse_args(argv)
    word = args.word
    if word is None:
        words = sys.stdin.read().split()
        word = words[0] if words else ""
    if not word:
        print("no input", file=sys.stderr)
        return 1
    for line in HuffmanTree(word).report():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())