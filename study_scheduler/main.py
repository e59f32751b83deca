from fastapi import FastAPI
from study_scheduler.config import configure_logging
from study_scheduler.database import engine
from study_scheduler.models import Base
from study_scheduler.routes import schedule

configure_logging()

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title="Study Scheduler API",
    description="Places generated learning blocks into the free time of a weekly schedule",
    version="1.0.0"
)

# Include routers
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to the Study Scheduler API",
        "version": "1.0.0",
        "features": [
            "Learning block placement between fixed commitments",
            "Schedule storage with overnight sleep normalisation",
        ],
        "endpoints": {
            "optimize": "POST /schedule/optimize - Fill a week with learning blocks",
            "default_config": "GET /schedule/config/default - Default learning settings",
            "schedules": "GET /schedule/ - Names of stored schedules",
            "schedule": "GET|PUT|DELETE /schedule/{name} - Stored schedule management",
            "optimize_saved": "POST /schedule/{name}/optimize - Optimize and store a saved schedule",
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m study_scheduler.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("study_scheduler.main:app", host="0.0.0.0", port=8000, reload=True)
