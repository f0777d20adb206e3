# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict
from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import setup_logger
from api.endpoints.floor_plans import router as floor_plans_router

# Set up logging
logger = setup_logger("floorplan_drafter.api")

# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    logger.info("Run on application startup.")
    Config.validate()

    yield  # This is where the application runs

    # Shutdown code (runs when application is shutting down)
    logger.info("Application shutting down.")

logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="FloorPlan Drafter API",
    description="""
    # FloorPlan Drafter API

    Turns room-level floor plan layouts into drafted architectural drawings.

    ## Features

    - Layout validation with grid snapping
    - Wall junction resolution and opening cuts
    - Three-level dimension chains
    - SVG sheets with hatching, door swings, stairs and a title block
    - Layout generation and refinement through an external generator

    ## Authentication

    All floor plan endpoints require an API key in the `X-API-Key` header.

    ## Workflow

    1. `POST /floor-plans/generate` with a design brief, or bring your own layout
    2. `POST /floor-plans/validate` to list errors and warnings
    3. `POST /floor-plans/render` to get the SVG for one floor
    4. `POST /floor-plans/refine` to change the layout in plain language
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Floor Plans",
            "description": "Layout validation, drafting and generation"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "FloorPlan Drafter API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.info("Health check requested")
    return {
        "status": "healthy",
        "message": "FloorPlan Drafter API is running",
        "generator": "configured" if Config.generator_configured() else "not configured",
    }

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with dependencies
app.include_router(
    floor_plans_router,
    prefix="/floor-plans",
    tags=["Floor Plans"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included floor plans router with prefix /floor-plans")

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
