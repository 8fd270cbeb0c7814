from __future__ import annotations

import random
import threading

import pytest

from huff1.core.codec_base import TextCodec
from huff1.core.codec_huffman import CodecHuffman, compress, decompress
from huff1.errors import CorruptedData, InvalidFormat, MalformedTree, TruncatedStream
from huff1.options import CodecOptions


@pytest.mark.parametrize(
    "text",
    [
        "",
        "aaaaaaaa",
        "x",
        "the quick brown fox",
        ":",
        "::::",
        "HUFF1:0:6:010061:",
        "a:b:c:d:e:f",
        "line one\r\nline two\rline three\n",
        "\x00\x01\x7f\x80\xff",
        "caffè ☕ 北京 résumé €",
        "😀𝄞 astral",
        "\ud800 lone surrogate \udfff",
        "\uffff\u0000",
    ],
)
def test_roundtrip(text: str) -> None:
    assert decompress(compress(text)) == text


def test_empty_in_empty_out() -> None:
    assert compress("") == ""
    assert decompress("") == ""


def test_roundtrip_random_seeded() -> None:
    rng = random.Random(20240611)
    alphabets = [
        "ab",
        "abcdefghijklmnopqrstuvwxyz :",
        "01:\r\n\t\x00",
        "αβγδεζηθ😀€:",
        "".join(chr(c) for c in range(0x20, 0x7F)),
    ]
    for _ in range(60):
        alphabet = rng.choice(alphabets)
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 2000)))
        assert decompress(compress(text)) == text


def test_payload_containing_delimiter() -> None:
    # find inputs whose packed payload carries ":" (0x3A) and check they survive
    rng = random.Random(7)
    hits = 0
    for _ in range(400):
        text = "".join(rng.choice("abcdefgh") for _ in range(rng.randint(5, 60)))
        blob = compress(text)
        payload = blob.split(":", 4)[4]
        if ":" in payload:
            hits += 1
            assert decompress(blob) == text
    assert hits > 0


def test_determinism() -> None:
    text = "she sells sea shells by the sea shore: 42 times"
    assert compress(text) == compress(text)


def test_upper_hex_option_roundtrip() -> None:
    text = "ÿÿé plus ascii"
    blob = compress(text, CodecOptions(hex_case="upper"))
    assert "00FF" in blob
    assert decompress(blob) == text
    assert "00ff" in compress(text)


def test_codec_class() -> None:
    codec = CodecHuffman()
    assert isinstance(codec, TextCodec)
    assert codec.codec_id == "huff1"
    assert codec.decompress(codec.compress("abc:abc")) == "abc:abc"


def test_concurrent_calls_are_independent() -> None:
    texts = [f"thread {i} " * (i + 1) for i in range(8)]
    results: dict[int, str] = {}

    def work(i: int) -> None:
        for _ in range(20):
            results[i] = decompress(compress(texts[i]))

    threads = [threading.Thread(target=work, args=(i,)) for i in range(len(texts))]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [results[i] for i in range(len(texts))] == texts


def test_error_scenarios() -> None:
    with pytest.raises(InvalidFormat):
        decompress("not-a-container")
    with pytest.raises(CorruptedData):
        decompress("HUFF1:0:5")
    with pytest.raises(MalformedTree):
        decompress("HUFF1:0:6:01006z:\x00")
    with pytest.raises(TruncatedStream):
        decompress("HUFF1:3:29:01006100100631006401006210072:n\x8a\xdc")
