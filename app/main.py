from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from app.core.config import settings
from app.core.config_loader import load_restaurant_config
from app.core.errors import BookingError
from app.api import bookings
from app.core.logger import setup_logging, logger
from app.services.booking_service import BookingService
from app.services.db_service import create_store
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Starting Restaurant Booking API")
    config = load_restaurant_config(settings.RESTAURANT_CONFIG_PATH)
    store = create_store(settings)
    await store.connect()
    logger.info(f"🗄️ Booking store ready ({store.name})")
    app.state.booking_service = BookingService(store, config)
    try:
        yield
    finally:
        # Shutdown
        await store.close()
        logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(BookingError)
async def booking_exception_handler(request: Request, exc: BookingError):
    if exc.status_code >= 500:
        logger.error(f"🔥 STORE ERROR on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err["loc"][1:]) or str(err["loc"][0]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Invalid request.", "errors": errors})

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"message": str(exc) or "Internal Server Error"}
    )

# Include routers
app.include_router(bookings.router, prefix=settings.API_V1_STR, tags=["Bookings"])

@app.get("/", response_class=PlainTextResponse)
async def welcome():
    return "Welcome to the Restaurant Booking API"

@app.get("/health")
async def health_check_std(request: Request):
    store = request.app.state.booking_service.store
    return {"status": "ok", "environment": settings.ENVIRONMENT, "store": store.name, "timestamp": datetime.now().isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
