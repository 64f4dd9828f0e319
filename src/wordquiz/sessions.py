import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from .config import settings
from .engine import QuizEngine
from .models import Direction
from .vocabulary import VocabularyManager

logger = logging.getLogger(__name__)


class QuizSession(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    engine: QuizEngine
    created_at: datetime


sessions: Dict[str, QuizSession] = {}


def default_direction() -> Direction:
    try:
        return Direction(settings.DEFAULT_DIRECTION)
    except ValueError:
        logger.warning(
            f"Unknown direction '{settings.DEFAULT_DIRECTION}', using source_to_target"
        )
        return Direction.SOURCE_TO_TARGET


def create_session(vocab_manager: VocabularyManager) -> str:
    engine = QuizEngine(vocab_manager.sources, direction=default_direction())
    vocab_manager.attach(engine)

    new_id = str(uuid.uuid4())
    sessions[new_id] = QuizSession(engine=engine, created_at=datetime.now())
    logger.info(f"New session: {new_id} [{len(engine.active_pool())} words]")
    return new_id


def get_active_session(session_id: Optional[str]) -> Optional[QuizSession]:
    if not session_id or session_id not in sessions:
        return None
    session = sessions[session_id]
    if datetime.now() - session.created_at > timedelta(
        minutes=settings.SESSION_TIMEOUT_MINUTES
    ):
        del sessions[session_id]
        logger.info(f"Session expired: {session_id}")
        return None
    return session


def drop_session(session_id: Optional[str]) -> bool:
    if session_id and session_id in sessions:
        del sessions[session_id]
        return True
    return False
