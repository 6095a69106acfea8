# main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from routers import hazards
from database import create_tables, test_connection
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Road Hazard Sync API",
    description="Optional sync endpoint for the crowdsourced road hazard map",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # The map runs in any browser origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Errors go out as {"error": "..."} rather than FastAPI's {"detail": ...}
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Bad request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "bad request"})

@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Starting Road Hazard Sync API...")

    # Test database connection
    if not test_connection():
        logger.error("Database connection failed! Check DATABASE_URL.")
        # Clients treat sync as optional, so keep serving
        logger.warning("Continuing startup despite database issues...")
    else:
        logger.info("Database connection successful")
        create_tables()

    logger.info("Startup completed successfully")

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on application shutdown"""
    logger.info("Shutting down Road Hazard Sync API...")

# Include routers
app.include_router(hazards.router)

@app.get("/")
def read_root():
    return {
        "message": "Road Hazard Sync API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "OK"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    db_status = test_connection()
    return {
        "status": "healthy" if db_status else "degraded",
        "service": "road-hazard-sync",
        "database": "connected" if db_status else "disconnected",
        "version": "1.0.0"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
