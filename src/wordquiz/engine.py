"""
Quiz session state machine.

A ``QuizEngine`` owns one ``SessionState`` and mutates it only through its
public operations. Presentation code reads snapshots (``state``) or
subscribes to change notifications; it never edits the state directly.
"""

import logging
import random
from typing import Callable, Dict, Iterable, List, Optional

from .config import settings
from .models import Direction, Feedback, SessionState, WordPair, WordSet

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class QuizEngine:
    def __init__(
        self,
        sources: Iterable[str],
        direction: Direction = Direction.SOURCE_TO_TARGET,
        rng: Optional[random.Random] = None,
        hint_threshold: int = settings.HINT_THRESHOLD,
        placeholder: str = settings.HINT_PLACEHOLDER,
    ):
        if hint_threshold < 1:
            raise ValueError(f"hint_threshold must be at least 1, got {hint_threshold}")
        self._sources: List[str] = list(sources)
        self._selection: Dict[str, bool] = {name: True for name in self._sources}
        self._word_sets: Dict[str, WordSet] = {}
        self._direction = direction
        self._rng = rng or random.Random()
        self._hint_threshold = hint_threshold
        self._placeholder = placeholder
        self._state = SessionState()
        self._listeners: List[StateListener] = []

    # --- Read-only views ---
    @property
    def state(self) -> SessionState:
        return self._state.model_copy()

    @property
    def selection(self) -> Dict[str, bool]:
        return dict(self._selection)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def sources(self) -> List[str]:
        return list(self._sources)

    @property
    def word_sets(self) -> Dict[str, WordSet]:
        return dict(self._word_sets)

    def active_pool(self) -> List[WordPair]:
        """Enabled words, concatenated in configured source order."""
        pool: List[WordPair] = []
        for name in self._sources:
            word_set = self._word_sets.get(name)
            if word_set is not None and self._selection.get(name):
                pool.extend(word_set.words)
        return pool

    # --- Observers ---
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    # --- Data ready ---
    def add_word_set(self, word_set: WordSet) -> None:
        """Register a freshly loaded source and keep the current word valid."""
        if word_set.name not in self._selection:
            logger.warning(f"Ignoring word set for unknown source '{word_set.name}'")
            return
        self._word_sets[word_set.name] = word_set
        logger.debug(f"Word set '{word_set.name}' ready ({len(word_set)} words)")
        self._reconcile()

    # --- Selection ---
    def set_selection(self, source_name: str, enabled: bool) -> None:
        if source_name not in self._selection:
            logger.warning(f"Selection change for unknown source '{source_name}' ignored")
            return
        self._selection[source_name] = bool(enabled)
        self._reconcile()

    def toggle_selection(self, source_name: str) -> None:
        if source_name not in self._selection:
            logger.warning(f"Selection change for unknown source '{source_name}' ignored")
            return
        self.set_selection(source_name, not self._selection[source_name])

    def _reconcile(self) -> None:
        current = self._state.current_word
        pool_ids = {word.id for word in self.active_pool()}
        if current is None or current.id not in pool_ids:
            self.draw_word()
        else:
            self._notify()

    # --- Direction ---
    def set_direction(self, direction: Direction) -> None:
        if direction is self._direction:
            return
        self._direction = direction
        # Expected answer changed; keep the word but restart the attempt.
        self._state = SessionState(current_word=self._state.current_word)
        self._notify()

    def toggle_direction(self) -> Direction:
        self.set_direction(self._direction.flipped())
        return self._direction

    # --- Quiz flow ---
    def draw_word(self) -> Optional[WordPair]:
        pool = self.active_pool()
        word = self._rng.choice(pool) if pool else None
        self._state = SessionState(current_word=word)
        self._notify()
        return word

    def submit_answer(self, raw_input: str) -> Feedback:
        """
        Check a guess against the current word.

        Returns ``Feedback.CORRECT`` on a match. The correct state is only
        visible to subscribers: a new word is drawn straight away, which
        resets ``feedback`` in the stored state.
        """
        current = self._state.current_word
        if current is None:
            return Feedback.NONE

        attempt = raw_input or ""
        guess = attempt.strip().lower()
        if guess in current.acceptable_answers(self._direction):
            self._state = SessionState(
                current_word=current,
                attempt=attempt,
                feedback=Feedback.CORRECT,
            )
            self._notify()
            self.draw_word()
            return Feedback.CORRECT

        state = self._state
        if state.hint_revealed:
            wrong_count, hint_revealed = 0, False
        else:
            wrong_count = state.wrong_count + 1
            hint_revealed = wrong_count >= self._hint_threshold
            if hint_revealed:
                wrong_count = self._hint_threshold
        self._state = SessionState(
            current_word=current,
            attempt=attempt,
            wrong_count=wrong_count,
            hint_revealed=hint_revealed,
            feedback=Feedback.NONE,
        )
        self._notify()
        return Feedback.NONE

    # --- Display ---
    def get_prompt_display(self) -> Optional[str]:
        current = self._state.current_word
        if current is None:
            return None
        return current.prompt_for(self._direction)

    def get_hint_text(self, transient_reveal_requested: bool = False) -> str:
        current = self._state.current_word
        if current is not None and (
            self._state.hint_revealed or transient_reveal_requested
        ):
            return current.answer_for(self._direction)
        return self._placeholder
