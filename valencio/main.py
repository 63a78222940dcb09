"""
Valencio - Storefront admin backend (FastAPI application)
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from valencio.config import DEFAULT_COOKIE_SECRET, settings
from valencio.database import init_db
from valencio.exceptions import ValencioError

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Storefront catalog settings with hub-activated admin sessions",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware (cookie-credentialed requests)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValencioError)
async def valencio_error_handler(request: Request, exc: ValencioError):
    """Service errors leave the API as {"error": code}, never as a traceback."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.code})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) for err in exc.errors()})
    logger.warning("Invalid request body for %s: %s", request.url.path, fields)
    return JSONResponse(status_code=400, content={"error": "invalid_data", "fields": fields})


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def check_secrets() -> bool:
    """Warn when the session cookie is still signed with the public placeholder key."""
    if settings.COOKIE_SECRET == DEFAULT_COOKIE_SECRET:
        logger.warning("COOKIE_SECRET is not set: admin session cookies can be forged. Set it in .env")
        return False
    return True


@app.on_event("startup")
def create_tables():
    """Make sure the key-value table exists before serving."""
    check_secrets()
    try:
        init_db()
        logger.info("Key-value store ready (%s)", settings.DATABASE_URL.split("://", 1)[0])
    except Exception as e:
        logger.exception("Key-value store initialisation failed: %s", e)
        raise


# Import and include routers
from valencio.api import auth_router, store_router  # noqa: E402

app.include_router(auth_router, prefix="/api", tags=["Admin Authentication"])
app.include_router(store_router, prefix="/api", tags=["Store Data"])
