"""Global pytest configuration for the word-count benchmark harness.

Ensures the ``src`` tree is importable regardless of whether the package has
been installed, and provides the small corpora shared across the unit tests.
"""

import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path so ``wordcount`` imports resolve
# without an editable install
project_root = Path(__file__).parent.parent
src_dir = project_root / 'src'

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from wordcount.corpus import corpus_from_text  # noqa: E402

SAMPLE_TEXT = """
The map and the long mutable counter   read the map
 koloboke counter\tnumpy array hash compiled default
string object string
the THE the\n\nmap
"""


@pytest.fixture
def tiny_corpus():
    """The six-token example corpus: a=3, b=2, c=1."""
    return corpus_from_text("a b a c b a")


@pytest.fixture
def sample_corpus():
    """A corpus that contains every strategy's probe key."""
    return corpus_from_text(SAMPLE_TEXT, source="sample")


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
