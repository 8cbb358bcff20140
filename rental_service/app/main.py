from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import engine, Base
from shared.core.log_config import configure_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from shared.models import users
from .models.space_sites import spaces
from .models.leasing_tenants import tenants
from .models.bookings import bookings
from .router.space_sites import spaces_router
from .router.leasing_tenants import tenants_router
from .router.bookings import bookings_router

configure_logging()

# Create all tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Room Rental Service API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(spaces_router.router)
app.include_router(tenants_router.router)
app.include_router(bookings_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
