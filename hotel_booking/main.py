import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from hotel_booking.routers import auth, hotels, bookings
from hotel_booking.db import SessionLocal, init_database
from hotel_booking.seed import seed_database

logging.basicConfig(level=os.getenv("LOG_LEVEL", "DEBUG").upper())
logger = logging.getLogger(__name__)

SEED_DATABASE = os.getenv("SEED_DATABASE", "1").lower() not in ("0", "false", "no")


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for creating tables and seeding the catalog"
    init_database()
    if SEED_DATABASE:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Hotel booker",
    description="Hotel catalog and room booking API based on FastAPI.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    content = {"message": first.get("msg", "Invalid request")}
    loc = [part for part in first.get("loc", ()) if part != "body"]
    # JSON decode errors carry a character offset, not a field name
    if loc and isinstance(loc[0], str):
        content["field"] = ".".join(str(part) for part in loc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error"},
    )


app.include_router(auth.router)
app.include_router(hotels.router)
app.include_router(bookings.router)
