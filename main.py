# main.py
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from database import VehiclesSession, init_vehicles_db, seed_manufacturers
from exceptions import CollaboratorError
from Clients import close_clients
from Services.car_router import router as car_router

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Vehicles API ({os.getenv('ENVIRONMENT', 'development')})")
    try:
        init_vehicles_db()
        with VehiclesSession() as db:
            seed_manufacturers(db)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise
    yield
    close_clients()
    logger.info("Vehicles API stopped")


# Create FastAPI app
app = FastAPI(
    title="Vehicles API",
    description="""
    Awesome ideas are driven by you.

    Stores vehicles and enriches each vehicle on read with:
    - its current price, from the pricing service
    - the postal address of its location, from the maps service
    """,
    version="1.0.0",
    contact={"name": "Vehicles API maintainers"},
    license_info={
        "name": "Apache License Version 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0",
    },
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# A failing pricing or maps service fails the request
@app.exception_handler(CollaboratorError)
async def collaborator_exception_handler(request: Request, exc: CollaboratorError):
    logger.error(f"Collaborator failure while processing {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "type": type(exc).__name__}
    )

# Exception handler for detailed error messages
@app.exception_handler(Exception)
async def debug_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error processing request: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "type": type(exc).__name__}
    )

# Include routers
app.include_router(car_router)

@app.get("/")
async def root():
    return {
        "message": "Welcome to the Vehicles API",
        "version": "1.0.0",
        "cars_url": "/cars",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("VEHICLES_PORT", "8080")))
