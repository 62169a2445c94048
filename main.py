from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, get_settings
from errors import MISSING_FIELDS_MESSAGE, SERVER_ERROR_MESSAGE, SubmissionError
from leaderboard import get_leaderboard
from logger import puzzle_logger
from models import ErrorResponse, LeaderboardEntry, SubmitRequest, SubmitResponse
from store import SubmissionStore, get_store, reset_store
from validator import submit_answer

WELCOME_MESSAGE = "Welcome to the Puzzle Submission API!"

# --- 1. Initialize FastAPI App ---
app = FastAPI(title="Puzzle Submission API")

# Any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Prepare the store indexes; the API still starts if the store is down."""
    settings = get_settings()
    puzzle_logger.info(
        f"🧩 Active week: {settings.active_week}, answer match: {settings.answer_match}, "
        f"leaderboard scope: {settings.leaderboard_scope}"
    )
    try:
        await get_store().ensure_indexes()
    except SubmissionError as e:
        puzzle_logger.warning(f"Could not prepare submission store: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    await reset_store()

# --- 2. Error Mapping ---

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies (not an object, wrong types) count as missing fields."""
    puzzle_logger.warning(f"REJECTED {request.url.path}: malformed body ({len(exc.errors())} errors)")
    return error_response(400, MISSING_FIELDS_MESSAGE)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework errors (undecodable body, unknown route) keep the {"error": ...} shape."""
    if exc.status_code == 400 and request.url.path == "/submit":
        puzzle_logger.warning(f"REJECTED /submit: unreadable body ({exc.detail})")
        return error_response(400, MISSING_FIELDS_MESSAGE)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

# --- 3. Define the API Endpoints ---

@app.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_MESSAGE


@app.post(
    "/submit",
    response_model=SubmitResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit(
    payload: SubmitRequest,
    store: SubmissionStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Records one attempt for the active week and reports whether it was correct.
    """
    try:
        is_correct = await submit_answer(store, payload.name, payload.email, payload.answer, settings)
    except SubmissionError as e:
        if e.status_code >= 500:
            puzzle_logger.error(f"Error in /submit route: {e}", exc_info=True)
        else:
            puzzle_logger.info(f"REJECTED /submit: {e}")
        return error_response(e.status_code, e.public_message)
    except Exception as e:
        puzzle_logger.error(f"Error in /submit route: {e}", exc_info=True)
        return error_response(500, SERVER_ERROR_MESSAGE)

    return SubmitResponse(is_correct=is_correct)


@app.get(
    "/leaderboard",
    response_model=List[LeaderboardEntry],
    responses={500: {"model": ErrorResponse}},
)
async def leaderboard(
    store: SubmissionStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Top participants by problems solved, fewer attempts first on ties.
    """
    try:
        return await get_leaderboard(store, settings)
    except Exception as e:
        puzzle_logger.error(f"Error in /leaderboard route: {e}", exc_info=True)
        return error_response(500, SERVER_ERROR_MESSAGE)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
