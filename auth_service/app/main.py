# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.log_config import configure_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from shared.models import users
from .routers import authrouter, userrouter

configure_logging()

# Create tables
Base.metadata.create_all(bind=engine)

# This MUST exist for uvicorn
app = FastAPI(title="Room Rental Auth API")

# 1️⃣ CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2️⃣ Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Routers
app.include_router(authrouter.router)
app.include_router(userrouter.router)


@app.get("/api/auth/health")
def health():
    return {"status": "healthy"}
