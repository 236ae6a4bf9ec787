import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from server.config import config
from server.database import engine, Base
from server.routes import router
from server.routes.prometheus import metrics_middleware

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# =========================================================
# FASTAPI APP
# =========================================================

app = FastAPI(title="Interval Timer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register Prometheus middleware
app.middleware("http")(metrics_middleware)

# Include API Router
app.include_router(router)

# =========================================================
# AUTO-CREATE TABLES ON STARTUP
# =========================================================
@app.on_event("startup")
def init_database():
    logger.info("🔄 Creating database tables if not exist...")
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables ready")
