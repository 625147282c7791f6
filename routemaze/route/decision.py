"""Question tree that leads a user to a route criterion."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, TextIO


@dataclass
class TreeNode:
    """A question, or an answer leading to a criterion, with child nodes."""

    question: str = ""
    answer: str = ""
    criteria: str = ""
    children: list[TreeNode] = field(default_factory=list)


def _parse_node(line: str) -> TreeNode | None:
    kind, sep, content = line.partition(":")
    if not sep:
        return None
    if kind == "Q":
        return TreeNode(question=content)
    if kind == "A":
        answer, arrow, criteria = content.partition("->")
        if not arrow:
            return None
        return TreeNode(answer=answer, criteria=criteria)
    return TreeNode()


class DecisionTree:
    """A tree of questions loaded from an indented text file."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def load_from_file(self, filename: str | os.PathLike[str]) -> None:
        """Read ``Q:text`` and ``A:answer->criteria`` lines; one leading space per level.

        Blank lines and lines starting with ``#`` are skipped.
        """
        stack: list[TreeNode] = []
        with open(filename, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                stripped = line.lstrip(" ")
                level = len(line) - len(stripped)
                node = _parse_node(stripped)
                if node is None:
                    continue

                if level == 0:
                    self.root = node
                elif level > len(stack):
                    raise ValueError("Invalid tree structure in file")
                else:
                    del stack[level:]
                    stack[-1].children.append(node)
                del stack[level:]
                stack.append(node)

    def choose_criteria(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> str:
        """Walk the tree by asking the user, and return the criterion of the leaf reached."""
        if self.root is None:
            raise RuntimeError("Decision tree not initialized")
        out = output if output is not None else sys.stdout
        current = self.root
        while current.children:
            out.write(f"\n{current.question}\n")
            for number, child in enumerate(current.children, start=1):
                out.write(f"{number}. {child.answer}\n")
            reply = input_func(f"Pilihan Anda [1-{len(current.children)}]: ")
            try:
                choice = int(reply.strip())
            except ValueError:
                choice = 0
            if not 1 <= choice <= len(current.children):
                raise ValueError("Pilihan tidak valid")
            current = current.children[choice - 1]
        return current.criteria

    def render(self) -> str:
        """Return the tree as indented ``Q:``/``A:`` lines."""
        return "".join(self._lines(self.root, 0))

    def _lines(self, node: TreeNode | None, depth: int) -> Iterator[str]:
        if node is None:
            return
        indent = " " * (depth * 2)
        if node.question:
            yield f"{indent}Q: {node.question}\n"
        else:
            yield f"{indent}A: {node.answer} -> {node.criteria}\n"
        for child in node.children:
            yield from self._lines(child, depth + 1)