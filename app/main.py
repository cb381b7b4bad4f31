from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.logging_config import setup_logging
from .database.dynamodb import get_db_connection
from .routers import events, bookings

setup_logging(settings.log_level)

app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    description="Developer event listings and bookings",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS for docs UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

db_connection = get_db_connection()

# Include routers
app.include_router(events.router)
app.include_router(bookings.router)


@app.get("/")
def read_root():
    return {"message": "DevEvent API", "status": "running"}
