"""
Corpus loading.

The corpus is read once, split on runs of whitespace and frozen. Every trial
receives the same ``Corpus`` instance; nothing mutates it after load.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, Tuple, Union

from wordcount.exceptions import CorpusLoadError
from wordcount.sizing import deep_size

logger = logging.getLogger(__name__)

CorpusSource = Union[str, Path, TextIO]


@dataclass(frozen=True)
class Corpus:
    """Immutable token sequence shared by every trial."""
    tokens: Tuple[str, ...]
    distinct_count: int
    baseline_retained_bytes: int
    source: str = "<memory>"

    def __len__(self) -> int:
        return len(self.tokens)


def _read_text(source: CorpusSource) -> Tuple[str, str]:
    if hasattr(source, "read"):
        name = getattr(source, "name", "<stream>")
        try:
            return source.read(), str(name)
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusLoadError(str(name), e) from e

    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read(), str(path)
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(str(path), e) from e


def corpus_from_text(text: str, source: str = "<memory>") -> Corpus:
    """Tokenize ``text`` and compute the distinct-token baseline."""
    tokens = tuple(text.split())
    if not tokens:
        raise AssertionError(f"corpus '{source}' contains no tokens")

    # First occurrences, in corpus order; these are the objects the maps end up keying on.
    distinct_tokens = tuple(dict.fromkeys(tokens))
    return Corpus(
        tokens=tokens,
        distinct_count=len(distinct_tokens),
        baseline_retained_bytes=deep_size(distinct_tokens),
        source=source,
    )


def load_corpus(source: CorpusSource) -> Corpus:
    """
    Load a corpus from a path or an open text stream.

    Args:
        source: Filesystem path to a UTF-8 text file, or a readable text stream

    Returns:
        The frozen corpus

    Raises:
        CorpusLoadError: If the source cannot be opened or read
        AssertionError: If the source contains no tokens
    """
    text, name = _read_text(source)
    corpus = corpus_from_text(text, source=name)
    logger.info(
        f"Loaded corpus {name}: {len(corpus.tokens)} tokens, "
        f"{corpus.distinct_count} distinct, baseline {corpus.baseline_retained_bytes} bytes"
    )
    return corpus
