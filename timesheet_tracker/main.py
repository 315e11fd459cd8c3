import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

from timesheet_tracker.config import APP_TITLE, CORS_ORIGINS, HOST, PORT, STATIC_DIR
from timesheet_tracker.logging_setup import configure_logging
from timesheet_tracker.store import TimesheetStore
from timesheet_tracker.timesheet import MalformedPayload
from timesheet_tracker.timesheet import router as timesheet_router
from timesheet_tracker.system import router as system_router
from timesheet_tracker.dashboard import router as dashboard_router

load_dotenv()
logger = logging.getLogger(__name__)

SERVER_ERROR = {"success": False, "error": "Internal Server Error"}


def create_app(store: Optional[TimesheetStore] = None, static_dir: Optional[str] = STATIC_DIR) -> FastAPI:
    configure_logging()
    app = FastAPI(title=APP_TITLE)
    app.state.store = store if store is not None else TimesheetStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Count + log every request before it reaches a route
    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        n = request.app.state.store.count_request()
        logger.info("%s %s - Request #%d", request.method, request.url.path, n)
        return await call_next(request)

    @app.exception_handler(MalformedPayload)
    async def malformed_payload(request: Request, exc: MalformedPayload):
        logger.error("Could not parse body for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=SERVER_ERROR)

    # Register routers
    app.include_router(dashboard_router)      # /
    app.include_router(timesheet_router)      # /api/timesheets
    app.include_router(system_router)         # /api/info, /health

    # Static files last so they never shadow an API route
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir), name="static")

    return app


app = create_app()


def run():
    # One worker only: the store lives in this process
    logger.info("Server running on port %d", PORT)
    uvicorn.run("timesheet_tracker.main:app", host=HOST, port=PORT, workers=1)


if __name__ == "__main__":
    run()
