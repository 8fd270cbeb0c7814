from dataclasses import dataclass
from typing import Optional, Dict, List, Union

import heapq
import itertools

# -------------------
# Strutture di base Huffman
# -------------------
@dataclass
class Leaf:
    symbol: int  # code unit UTF-16
    weight: int = 0


@dataclass
class Internal:
    left: "Node"
    # None solo nel wrapper dell'alfabeto a un simbolo
    right: Optional["Node"] = None
    weight: int = 0


Node = Union[Leaf, Internal]


def build_huffman_tree(freq: Dict[int, int]) -> Optional[Node]:
    """
    Costruzione greedy classica con min-heap su (peso, sequenza).

    La sequenza è l'ordine di inserimento: foglie nell'ordine della tabella
    frequenze, poi ogni nodo fuso. A parità di peso esce prima il nodo inserito
    prima, quindi la forma dell'albero è deterministica.
    """
    heap: List[tuple[int, int, Node]] = []
    counter = itertools.count()

    for sym, f in freq.items():
        if f > 0:
            heapq.heappush(heap, (f, next(counter), Leaf(symbol=sym, weight=f)))

    if not heap:
        return None

    # Caso speciale: un solo simbolo => nodo interno sintetico con la sola foglia a sinistra
    if len(heap) == 1:
        f, _, only = heap[0]
        return Internal(left=only, right=None, weight=f)

    while len(heap) > 1:
        f1, _, n1 = heapq.heappop(heap)
        f2, _, n2 = heapq.heappop(heap)
        parent = Internal(left=n1, right=n2, weight=f1 + f2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def build_code_table(root: Node) -> Dict[int, str]:
    codes: Dict[int, str] = {}

    def dfs(node: Optional[Node], path: str) -> None:
        if node is None:
            return
        # Foglia
        if isinstance(node, Leaf):
            codes[node.symbol] = path if path else "0"
            return
        dfs(node.left, path + "0")
        dfs(node.right, path + "1")

    dfs(root, "")
    return codes
