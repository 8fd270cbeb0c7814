from __future__ import annotations

from typing import Dict, List

# -------------------
# Alfabeto: unità UTF-16
# -------------------
# Un simbolo è una code unit UTF-16 (0..0xFFFF). Le coppie surrogate NON vengono
# ricombinate: un carattere fuori dal BMP produce due simboli.


def text_to_units(text: str) -> List[int]:
    """str -> lista di code unit UTF-16 (big-endian, surrogati isolati ammessi)."""
    raw = text.encode("utf-16-be", "surrogatepass")
    return [(raw[i] << 8) | raw[i + 1] for i in range(0, len(raw), 2)]


def units_to_text(units: List[int]) -> str:
    out = bytearray()
    for u in units:
        out.append((u >> 8) & 0xFF)
        out.append(u & 0xFF)
    return bytes(out).decode("utf-16-be", "surrogatepass")


def build_freq_table(units: List[int]) -> Dict[int, int]:
    """
    Frequenze per simbolo.
    L'ordine delle chiavi è quello di prima occorrenza: è l'ordine di inserimento
    usato dal tree builder, quindi deve restare deterministico.
    """
    freq: Dict[int, int] = {}
    for u in units:
        freq[u] = freq.get(u, 0) + 1
    return freq
