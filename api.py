"""
Main API application for the Plant Match storefront core
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from config import CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT

from plant_match_api import router as plant_match_router

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Plant Match API", version="1.0.0")

# Include plant match API routes
app.include_router(plant_match_router, prefix="/api")

# Enable CORS for the storefront frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"message": "Plant Match API", "version": "1.0.0"}


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
