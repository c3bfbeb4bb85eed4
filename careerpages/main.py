import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careerpages.core.config import CORS_ORIGINS, LOG_DIR, LOG_LEVEL, RUN_MIGRATIONS
from careerpages.core.errors import AuthenticationRequired, authentication_required_handler
from careerpages.core.logging_config import setup_logging

# ✅ Import All API Routes
from careerpages.api.routes import auth, companies, users, comments, jobs, health, careers

setup_logging(LOG_LEVEL, LOG_DIR)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if RUN_MIGRATIONS:
        from careerpages.db.migrate import run_migrations
        run_migrations()
    else:
        from careerpages.db.init_db import init_db
        init_db()
    logger.info("Careers Page Builder API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Careers Page Builder", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)

# Page routes redirect to login, API routes answer 401
app.add_exception_handler(AuthenticationRequired, authentication_required_handler)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(companies.router)
app.include_router(users.router)
app.include_router(comments.router)
app.include_router(jobs.router)
# Catch-all "/{slug}/..." page routes go last
app.include_router(careers.router)


@app.get("/")
def root():
    return {"status": "Careers Page Builder API running"}
