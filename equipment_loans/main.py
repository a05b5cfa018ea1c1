import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request

from starlette.middleware.base import BaseHTTPMiddleware
from equipment_loans.config import settings
from equipment_loans.routes import users, materials, loans, history, snapshot

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log incoming requests."""
    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        logger.info(f"{request.method} {request.url.path} - IP: {client_ip}")
        
        response = await call_next(request)
        if response.status_code >= 400:
            logger.warning(f"{request.method} {request.url.path} -> {response.status_code}")
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} (timezone {settings.timezone})")
    
    yield
    
    logger.info(f"Stopping {settings.app_name}; in-memory data is discarded")


app = FastAPI(
    title=settings.app_name,
    description="Equipment loan tracker: users, materials, checkouts and returns",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Logging middleware (last, to log everything)
app.add_middleware(LoggingMiddleware)

# Include routers
app.include_router(users.router)
app.include_router(materials.router)
app.include_router(loans.router)
app.include_router(history.router)
app.include_router(snapshot.router)

@app.get("/")
async def root():
    return {"message": settings.app_name, "version": "1.0.0"}

@app.get("/api/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "equipment_loans.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
