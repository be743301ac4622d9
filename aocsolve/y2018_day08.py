"""License tree: metadata checksum and root value of a serialised tree."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path


@dataclass
class Tree:
    metadata: list[int]
    children: list[Tree] = field(default_factory=list)

    def checksum(self) -> int:
        """Sum of the metadata of this node and every node below it."""
        return sum(self.metadata) + sum(child.checksum() for child in self.children)

    def value(self) -> int:
        """Metadata sum for a leaf; otherwise the sum of the children the metadata names.

        Metadata entries are 1-based child indexes; entries naming no child count nothing.
        """
        if not self.children:
            return sum(self.metadata)
        return sum(
            self.children[index - 1].value()
            for index in self.metadata
            if 1 <= index <= len(self.children)
        )


def _read_node(numbers: Iterator[int]) -> Tree:
    try:
        n_children = next(numbers)
        n_metadata = next(numbers)
    except StopIteration:
        raise ValueError("truncated tree data") from None
    children = [_read_node(numbers) for _ in range(n_children)]
    metadata = list(islice(numbers, n_metadata))
    if len(metadata) < n_metadata:
        raise ValueError("truncated tree data")
    return Tree(metadata, children)


def parse_tree(numbers: Iterable[int]) -> Tree:
    """Build a tree from '#children #metadata {children} metadata' numbers.

    Numbers left over after the root node are ignored.
    """
    return _read_node(iter(numbers))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read the navigation license tree.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    args = parser.parse_args(argv)
    tree = parse_tree(int(word) for word in args.input.read_text().split())
    print(tree.checksum())
    print(tree.value())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())