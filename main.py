import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from core.errors import InvalidArgument, MissingData
from api.v1.router import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOG = logging.getLogger(__name__)


app = FastAPI(title="FitCalc API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


# ─── calculator errors → client errors ─────────────────────────────
@app.exception_handler(InvalidArgument)
async def _invalid_argument(request: Request, exc: InvalidArgument) -> JSONResponse:
    _LOG.warning("rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid_argument", "detail": str(exc)},
    )


@app.exception_handler(MissingData)
async def _missing_data(request: Request, exc: MissingData) -> JSONResponse:
    _LOG.warning("rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": "incomplete_profile", "detail": str(exc), "missing": exc.fields},
    )


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.env_name}
