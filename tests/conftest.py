import os
import random
import tempfile

import pytest

# Settings are read at import time, so point them at scratch data first.
_DATA_DIR = tempfile.mkdtemp(prefix="wordquiz-tests-")
VOCAB_DIR = os.path.join(_DATA_DIR, "vocabulary")
os.makedirs(VOCAB_DIR)
with open(os.path.join(VOCAB_DIR, "nouns.csv"), "w", encoding="utf-8") as fh:
    fh.write("gato,cat\nperro,dog\n")
with open(os.path.join(VOCAB_DIR, "verbs.csv"), "w", encoding="utf-8") as fh:
    fh.write("comer,to eat/eat\n")
# pronouns.csv is deliberately absent: that source fails to load.

os.environ["WORDQUIZ_VOCAB_DIR"] = VOCAB_DIR
os.environ["WORDQUIZ_LOG_DIR"] = os.path.join(_DATA_DIR, "log")
os.environ["WORDQUIZ_SOURCES"] = "nouns,verbs,pronouns"
os.environ.pop("WORDQUIZ_LOG_TO_DB", None)

from wordquiz.models import WordPair, WordSet  # noqa: E402


class FirstChoice(random.Random):
    """Always picks the first element of the pool."""

    def choice(self, seq):
        return seq[0]


def make_set(name, *pairs):
    return WordSet(
        name=name,
        words=tuple(WordPair(source=source, target=target) for source, target in pairs),
    )


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def nouns():
    return make_set("nouns", ("gato", "cat"), ("perro", "dog"))


@pytest.fixture
def verbs():
    return make_set("verbs", ("comer", "to eat/eat"))


@pytest.fixture
def word_set_factory():
    return make_set
