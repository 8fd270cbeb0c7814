from __future__ import annotations

import string
from typing import List

from huff1.core.tree import Internal, Leaf, Node
from huff1.errors import MalformedTree

# Serialized tree (pre-order):
#   "0"            -> internal node, followed by left subtree then right subtree
#   "1" + HHHH     -> leaf, HHHH = code unit as 4 hex digits
# The lone-symbol wrapper serializes as "0" + leaf with no right subtree.
MARK_INTERNAL = "0"
MARK_LEAF = "1"
SYMBOL_HEX_DIGITS = 4

_HEX = frozenset(string.hexdigits)


def serialize_tree(root: Node, *, upper: bool = False) -> str:
    fmt = "04X" if upper else "04x"
    out: List[str] = []

    def walk(node: Node | None) -> None:
        if node is None:
            return
        if isinstance(node, Leaf):
            out.append(MARK_LEAF)
            out.append(format(node.symbol, fmt))
            return
        out.append(MARK_INTERNAL)
        walk(node.left)
        walk(node.right)

    walk(root)
    return "".join(out)


def deserialize_tree(encoded: str) -> Node:
    """Rebuild a tree from its serialized form.

    Explicit stack instead of recursion: the input comes from a container and
    a long run of "0" markers must not blow the interpreter stack.
    Internal weights are irrelevant after reconstruction and stay 0.
    """
    n = len(encoded)
    pos = 0
    # one frame per open internal node: the children collected so far
    stack: List[List[Node]] = []
    root: Node | None = None

    while root is None:
        if pos >= n:
            if len(stack) == 1 and len(stack[0]) == 1 and isinstance(stack[0][0], Leaf):
                root = Internal(left=stack[0][0], right=None)
                break
            raise MalformedTree(f"tree truncated at marker {pos} (len={n})")

        marker = encoded[pos]
        pos += 1

        if marker == MARK_INTERNAL:
            stack.append([])
            continue
        if marker != MARK_LEAF:
            raise MalformedTree(f"unknown tree marker {marker!r} at {pos - 1}")

        digits = encoded[pos : pos + SYMBOL_HEX_DIGITS]
        if len(digits) < SYMBOL_HEX_DIGITS or not all(c in _HEX for c in digits):
            raise MalformedTree(f"leaf marker at {pos - 1} lacks {SYMBOL_HEX_DIGITS} hex digits")
        pos += SYMBOL_HEX_DIGITS
        node: Node = Leaf(symbol=int(digits, 16))

        # risale chiudendo i nodi interni completi
        while True:
            if not stack:
                root = node
                break
            stack[-1].append(node)
            if len(stack[-1]) < 2:
                break
            left, right = stack.pop()
            node = Internal(left=left, right=right)

    if pos != n:
        raise MalformedTree(f"trailing data after tree at {pos} (len={n})")
    if isinstance(root, Leaf):
        raise MalformedTree("tree root must be an internal node")
    return root
