"""
Word-count map benchmark harness.

Measures the time and retained memory of counting word frequencies with a
closed set of map strategies, swept across nine load-factor configurations.
"""

__version__ = "0.1.0"

from wordcount.corpus import Corpus, load_corpus
from wordcount.driver import run_memory_sweep, verify_equivalence
from wordcount.hash_config import LoadFactorConfig, derive_config, initial_capacity
from wordcount.results import ResultTable
from wordcount.trial import Trial, new_trial

__all__ = [
    "__version__",
    "Corpus",
    "load_corpus",
    "LoadFactorConfig",
    "derive_config",
    "initial_capacity",
    "ResultTable",
    "Trial",
    "new_trial",
    "run_memory_sweep",
    "verify_equivalence",
]
