from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from ehotel.routers import bookings, customers, employees, hotel_chains, hotels, payments, rentals, rooms
from ehotel.db import init_database
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for initing database"
    init_database()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="EHotel",
    description="Property management for hotel chains: room search, bookings, check-in, payments and administration.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """The database refused the write: duplicate key or a row still referenced."""
    logger.error(f"Integrity violation on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Operation rejected by a database constraint"},
    )


app.include_router(rooms.router)
app.include_router(bookings.router)
app.include_router(rentals.router)
app.include_router(payments.router)
app.include_router(hotels.router)
app.include_router(hotel_chains.router)
app.include_router(customers.router)
app.include_router(employees.router)
