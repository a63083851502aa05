import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ALLOW_ORIGINS, HOST, MONGO_DB_NAME, PORT
from .database import close_mongo_client, create_mongo_client
from .logging_config import configure_logging
from .models.marks import ensure_marks_indexes
from .routes import health as health_routes
from .routes import marks as marks_routes
from .routes import ui as ui_routes
from .routes.marks import INVALID_INPUT

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_mongo_client()
    app.state.mongo_client = client
    try:
        ensure_marks_indexes(client[MONGO_DB_NAME])
    except Exception:
        # The API still starts; store calls will report the fault per request.
        logger.exception("Could not create marks indexes")
    try:
        yield
    finally:
        close_mongo_client(client)


app = FastAPI(title="University Marks Sample APP", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    if request.url.path.startswith("/api/"):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_INPUT, "success": False})
    return await request_validation_exception_handler(request, exc)


app.include_router(health_routes.router, prefix="/api/health", tags=["health"])
app.include_router(marks_routes.router, prefix="/api/marks", tags=["marks"])
app.include_router(ui_routes.router, prefix="/marks", include_in_schema=False)


def run():
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
