from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

ANSWER_DELIMITER = "/"


class Direction(str, Enum):
    SOURCE_TO_TARGET = "source_to_target"
    TARGET_TO_SOURCE = "target_to_source"

    def flipped(self) -> "Direction":
        if self is Direction.SOURCE_TO_TARGET:
            return Direction.TARGET_TO_SOURCE
        return Direction.SOURCE_TO_TARGET


class Feedback(str, Enum):
    NONE = "none"
    CORRECT = "correct"


class WordPair(BaseModel):
    """One vocabulary entry. Either side may list alternatives as ``a/b``."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    id: str = ""

    @model_validator(mode="before")
    @classmethod
    def _derive_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            data = dict(data)
            data["id"] = f"{data.get('source', '')}|{data.get('target', '')}"
        return data

    def prompt_for(self, direction: Direction) -> str:
        if direction is Direction.SOURCE_TO_TARGET:
            return self.source
        return self.target

    def answer_for(self, direction: Direction) -> str:
        if direction is Direction.SOURCE_TO_TARGET:
            return self.target
        return self.source

    def acceptable_answers(self, direction: Direction) -> List[str]:
        raw = self.answer_for(direction).lower()
        parts = (part.strip() for part in raw.split(ANSWER_DELIMITER))
        return [part for part in parts if part]


class WordSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    words: Tuple[WordPair, ...] = ()

    def __len__(self) -> int:
        return len(self.words)


class SessionState(BaseModel):
    current_word: Optional[WordPair] = None
    attempt: str = ""
    wrong_count: int = Field(default=0, ge=0)
    hint_revealed: bool = False
    feedback: Feedback = Feedback.NONE


# --- API models ---
class SourceStatus(BaseModel):
    id: str
    name: str
    enabled: bool
    loaded: bool
    count: int


class QuizSnapshot(BaseModel):
    prompt: Optional[str]
    hint: str
    hint_revealed: bool
    wrong_count: int
    feedback: Feedback
    attempt: str
    direction: Direction
    prompt_language: str
    answer_language: str
    sources: List[SourceStatus]


class AnswerResult(BaseModel):
    answer: str
    is_correct: bool
    state: QuizSnapshot
