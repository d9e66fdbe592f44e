"""Sentence-aligned text chunking with word-based overlap.

Text is split into sentence-like units and packed greedily into chunks of
roughly *max_chunk_chars* characters.  A sentence is never cut in half, so a
single sentence longer than the limit becomes its own oversized chunk.

Overlap is carried over as whole words: the last ``overlap_chars // 5`` words
of a closed chunk seed the next one.  Five characters per word is only a rough
average, so the real overlap length approximates *overlap_chars* rather than
matching it.
"""

import re
from typing import List

from chunkwise.models.page import Chunk, ChunkMetadata

# Whitespace run directly after sentence-terminal punctuation
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")

# Average word length used to turn the overlap budget into a word count
CHARS_PER_WORD = 5


def split_sentences(text: str) -> List[str]:
    """Split *text* into sentence units; terminal punctuation stays attached."""
    return [unit for unit in _SENTENCE_BOUNDARY_RE.split(text) if unit]


def overlap_words(buffer: str, overlap_chars: int) -> str:
    """Return the trailing words of *buffer* carried into the next chunk."""
    word_count = overlap_chars // CHARS_PER_WORD
    if word_count <= 0:
        return ""
    return " ".join(buffer.split()[-word_count:])


def _close(buffer: str, index: int) -> Chunk:
    text = buffer.strip()
    return Chunk(text=text, index=index, metadata=ChunkMetadata(char_count=len(text)))


def chunk_text(text: str, max_chunk_chars: int, overlap_chars: int) -> List[Chunk]:
    """Split *text* into overlapping chunks of about *max_chunk_chars* characters.

    A chunk is closed as soon as appending the next sentence would push it
    past *max_chunk_chars*; the following chunk starts with the overlap words
    of the closed one.  Empty input yields an empty list and input without any
    sentence punctuation yields a single chunk.

    The caller decides whether to chunk at all: *max_chunk_chars* is expected
    to be positive.
    """
    chunks: List[Chunk] = []
    buffer = ""

    for sentence in split_sentences(text):
        if buffer and len(buffer) + len(sentence) > max_chunk_chars:
            chunks.append(_close(buffer, len(chunks)))
            carry = overlap_words(buffer, overlap_chars)
            buffer = f"{carry} {sentence}" if carry else sentence
        else:
            buffer = f"{buffer} {sentence}" if buffer else sentence

    if buffer.strip():
        chunks.append(_close(buffer, len(chunks)))

    return chunks
