import asyncio
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .engine import QuizEngine
from .models import WordPair, WordSet

logger = logging.getLogger(__name__)


def parse_word_pairs(text: str) -> List[WordPair]:
    """
    Parse ``source,target`` lines into word pairs.

    Blank lines are skipped. Every comma splits a field and only the first
    two fields are kept; quoting is not interpreted, so a field cannot
    contain a comma. A line without a comma gets an empty target.
    """
    lines = pd.Series(text.splitlines(), dtype="object")
    lines = lines[lines.str.strip() != ""]
    if lines.empty:
        return []

    fields = lines.str.split(",", expand=True)
    if 1 not in fields.columns:
        fields[1] = None
    fields = fields[[0, 1]].fillna("").apply(lambda col: col.str.strip())
    return [
        WordPair(source=source, target=target)
        for source, target in zip(fields[0], fields[1])
    ]


class VocabularyManager:
    """Loads one WordSet per configured source from ``<directory>/<name>.csv``."""

    def __init__(self, directory: str, sources: Iterable[str]):
        self.directory = directory
        self.sources: List[str] = list(sources)
        self.word_sets: Dict[str, WordSet] = {}

    def source_path(self, name: str) -> str:
        return os.path.join(self.directory, f"{name}.csv")

    def load_source(self, name: str) -> Optional[WordSet]:
        path = self.source_path(name)
        try:
            with open(path, encoding="utf-8-sig") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return None

        word_set = WordSet(name=name, words=tuple(parse_word_pairs(text)))
        self.word_sets[name] = word_set
        logger.info(f"Loaded {len(word_set)} words from {name}")
        return word_set

    def _prepare(self) -> bool:
        self.word_sets = {}
        if not os.path.isdir(self.directory):
            logger.warning(f"Vocabulary directory {self.directory} does not exist.")
            return False
        return True

    def load_all(self):
        if not self._prepare():
            return
        for name in self.sources:
            self.load_source(name)

    async def load_all_async(self):
        """Read every source in a worker thread so startup does not block the loop."""
        if not self._prepare():
            return
        await asyncio.gather(
            *(asyncio.to_thread(self.load_source, name) for name in self.sources)
        )

    def get_word_sets(self) -> List[WordSet]:
        return [self.word_sets[name] for name in self.sources if name in self.word_sets]

    def get_sources(self) -> List[Dict[str, Any]]:
        sources = []
        for name in self.sources:
            word_set = self.word_sets.get(name)
            sources.append(
                {
                    "id": name,
                    "name": name.replace("_", " ").title(),
                    "loaded": word_set is not None,
                    "count": len(word_set) if word_set is not None else 0,
                }
            )
        return sources

    def attach(self, engine: QuizEngine):
        """Hand every loaded set to an engine's data-ready handler."""
        for word_set in self.get_word_sets():
            engine.add_word_set(word_set)
