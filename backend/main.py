import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.errors import CareerCompassError, ValidationError
from services.identity import IdentityProvider
from services.record_store import InMemoryRecordStore, RecordStore, load_seed

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def _career_compass_error_handler(request: Request, exc: CareerCompassError):
    if isinstance(exc, ValidationError):
        # Same shape as FastAPI's own request validation errors
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": [
                    {"loc": ["body", exc.field], "msg": exc.message, "type": "value_error"}
                ]
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(
    store: RecordStore | None = None,
    identity_provider: IdentityProvider | None = None,
    seed_file: str | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Career Compass API",
        description="Role-based career guidance: quizzes, resume skill matching, mentoring",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if store is None:
        store = InMemoryRecordStore()
        seed_file = settings.seed_file if seed_file is None else seed_file
    if seed_file:
        load_seed(store, seed_file)

    app.state.store = store
    app.state.identity_provider = identity_provider or IdentityProvider(
        store, settings.jwt_secret, settings.jwt_ttl_minutes
    )
    app.state.limiter = limiter

    app.add_exception_handler(CareerCompassError, _career_compass_error_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.include_router(router)
    return app


app = create_app()
