# pricing_main.py
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from database import init_pricing_db
from Services.price_router import router as price_router

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# All pricing endpoints live under this path
BASE_PATH = "/services"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Pricing Service ({os.getenv('ENVIRONMENT', 'development')})")
    try:
        init_pricing_db()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise
    yield


app = FastAPI(
    title="Pricing Service",
    description="Stores one price per vehicle. Prices are generated by the service when created.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Exception)
async def debug_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error processing request: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "type": type(exc).__name__}
    )

app.include_router(price_router, prefix=BASE_PATH)

@app.get(BASE_PATH)
async def root():
    return {
        "message": "Welcome to the Pricing Service",
        "version": "1.0.0",
        "prices_url": f"{BASE_PATH}/price",
        "docs_url": "/docs"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PRICING_PORT", "8082")))
