from .engine import QuizEngine
from .models import Direction, Feedback, SessionState, WordPair, WordSet
from .vocabulary import VocabularyManager, parse_word_pairs

__all__ = [
    "Direction",
    "Feedback",
    "QuizEngine",
    "SessionState",
    "VocabularyManager",
    "WordPair",
    "WordSet",
    "parse_word_pairs",
]
