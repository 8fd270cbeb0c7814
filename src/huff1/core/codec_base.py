from __future__ import annotations

from abc import ABC, abstractmethod


class TextCodec(ABC):
    """
    Minimal interface for pluggable text codecs.

    str -> container str -> str. Implementations are stateless: every call
    builds its own structures, so one instance can be shared across threads.
    """

    codec_id: str

    @abstractmethod
    def compress(self, text: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def decompress(self, blob: str) -> str:
        raise NotImplementedError
