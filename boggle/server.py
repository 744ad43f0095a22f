import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from boggle.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_boggle = None


class ConfigureRequest(BaseModel):
    words: list[str]
    presorted: bool | None = None


class SolveRequest(BaseModel):
    width: int
    height: int
    letters: str


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _boggle
        from boggle.solver import Boggle

        _boggle = Boggle(min_length=settings.MIN_WORD_LENGTH)
        logger.info("Solver ready (min_word_length=%d)", settings.MIN_WORD_LENGTH)
        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        configured = _boggle is not None and _boggle.configured
        return {
            "status": "ok",
            "configured": configured,
            "word_count": _boggle.word_count if configured else 0,
        }

    @application.post("/configure")
    async def configure(body: ConfigureRequest):
        from boggle.dictionary import ConfigurationError
        from boggle.metrics import StageTimer

        presorted = settings.PRESORTED_WORDS if body.presorted is None else body.presorted
        logger.info("POST /configure words=%d presorted=%s", len(body.words), presorted)

        timer = StageTimer()
        try:
            with timer.stage("index_build"):
                count = _boggle.configure(body.words, presorted=presorted)
        except ConfigurationError as e:
            raise HTTPException(400, str(e))

        return JSONResponse({
            "word_count": count,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from boggle.metrics import SearchStats, StageTimer
        from boggle.solver import BoardSizeMismatch

        logger.info("POST /solve %dx%d letters=%s", body.width, body.height, body.letters)

        if not _boggle.configured:
            raise HTTPException(409, "No legal words configured; POST /configure first")
        cells = body.width * body.height
        if settings.MAX_BOARD_CELLS and cells > settings.MAX_BOARD_CELLS:
            raise HTTPException(413, f"Board too large (max {settings.MAX_BOARD_CELLS} cells)")

        timer = StageTimer()
        stats = SearchStats()
        try:
            with timer.stage("solve"):
                all_words = _boggle.solve(body.width, body.height, body.letters,
                                          min_length=settings.MIN_WORD_LENGTH, stats=stats)
        except BoardSizeMismatch as e:
            logger.warning("Board size mismatch: %s", e)
            return JSONResponse({"words": [], "word_count": 0, "error": str(e)}, status_code=422)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        result = {
            "words": words,
            "word_count": len(all_words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }
        if settings.DEBUG:
            result["search_stats"] = stats.as_dict()
        return JSONResponse(result)

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
