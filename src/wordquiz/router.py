import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from .config import settings
from .engine import QuizEngine
from .globals import templates, vocab_manager
from .models import AnswerResult, Direction, Feedback, QuizSnapshot, SourceStatus
from .sessions import create_session, drop_session, get_active_session, sessions

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Dependencies ---
def get_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> Optional[str]:
    return session_id


def session_error() -> JSONResponse:
    return JSONResponse({"error": "Session invalid"}, status_code=401)


def build_snapshot(engine: QuizEngine, reveal: bool = False) -> QuizSnapshot:
    state = engine.state
    selection = engine.selection
    word_sets = engine.word_sets

    if engine.direction is Direction.SOURCE_TO_TARGET:
        prompt_language = settings.SOURCE_LANGUAGE
        answer_language = settings.TARGET_LANGUAGE
    else:
        prompt_language = settings.TARGET_LANGUAGE
        answer_language = settings.SOURCE_LANGUAGE

    sources = []
    for name in engine.sources:
        word_set = word_sets.get(name)
        sources.append(
            SourceStatus(
                id=name,
                name=name.replace("_", " ").title(),
                enabled=selection[name],
                loaded=word_set is not None,
                count=len(word_set) if word_set is not None else 0,
            )
        )

    return QuizSnapshot(
        prompt=engine.get_prompt_display(),
        hint=engine.get_hint_text(reveal),
        hint_revealed=state.hint_revealed,
        wrong_count=state.wrong_count,
        feedback=state.feedback,
        attempt=state.attempt,
        direction=engine.direction,
        prompt_language=prompt_language,
        answer_language=answer_language,
        sources=sources,
    )


# --- Routes ---
@router.get("/", response_class=HTMLResponse)
async def home(request: Request, session_id: Optional[str] = Depends(get_session_id)):
    session = get_active_session(session_id)
    new_id = None
    if session is None:
        new_id = create_session(vocab_manager)
        session = sessions[new_id]

    response = templates.TemplateResponse(
        request,
        "quiz.html",
        {
            "title": "Language Learning App",
            "snapshot": build_snapshot(session.engine),
        },
    )
    if new_id:
        response.set_cookie(
            key=settings.SESSION_COOKIE_NAME,
            value=new_id,
            httponly=True,
            samesite="Lax",
        )
    return response


@router.get("/api/sources")
async def get_sources():
    return vocab_manager.get_sources()


@router.get("/api/state", response_model=QuizSnapshot)
async def get_state(reveal: bool = False, session_id: str = Depends(get_session_id)):
    session = get_active_session(session_id)
    if not session:
        return session_error()
    return build_snapshot(session.engine, reveal)


@router.post("/api/answer", response_model=AnswerResult)
async def submit_answer(
    answer: str = Form(""), session_id: str = Depends(get_session_id)
):
    session = get_active_session(session_id)
    if not session:
        return session_error()

    feedback = session.engine.submit_answer(answer)
    return AnswerResult(
        answer=answer,
        is_correct=feedback is Feedback.CORRECT,
        state=build_snapshot(session.engine),
    )


@router.post("/api/selection", response_model=QuizSnapshot)
async def update_selection(
    source: str = Form(...),
    enabled: Optional[bool] = Form(None),
    session_id: str = Depends(get_session_id),
):
    session = get_active_session(session_id)
    if not session:
        return session_error()

    if enabled is None:
        session.engine.toggle_selection(source)
    else:
        session.engine.set_selection(source, enabled)
    return build_snapshot(session.engine)


@router.post("/api/direction", response_model=QuizSnapshot)
async def update_direction(
    direction: Optional[str] = Form(None), session_id: str = Depends(get_session_id)
):
    session = get_active_session(session_id)
    if not session:
        return session_error()

    if direction is None:
        session.engine.toggle_direction()
    else:
        try:
            session.engine.set_direction(Direction(direction))
        except ValueError:
            return JSONResponse({"error": "Invalid direction"}, status_code=400)
    return build_snapshot(session.engine)


@router.post("/api/skip", response_model=QuizSnapshot)
async def skip_word(session_id: str = Depends(get_session_id)):
    session = get_active_session(session_id)
    if not session:
        return session_error()
    session.engine.draw_word()
    return build_snapshot(session.engine)


@router.post("/api/reset")
async def reset_session(response: Response, session_id: str = Depends(get_session_id)):
    if drop_session(session_id):
        logger.info(f"Session reset: {session_id}")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"status": "success"}
