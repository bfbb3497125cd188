"""
Application settings read from the environment (.env is loaded if present)
"""
import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://data/db.sqlite3")

# JWT
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-this-in-production")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))  # 7 days

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173").rstrip("/")

# Business rules
ACTIVATION_FEE = Decimal("500")
REFERRAL_BONUSES = (Decimal("200"), Decimal("150"), Decimal("50"))  # level 1, 2, 3
REFERRAL_CODE_PREFIX = "EM"
REFERRAL_CODE_ATTEMPTS = 10

MIN_PASSWORD_LENGTH = 6
MIN_BLOG_CONTENT_LENGTH = 500


def is_production() -> bool:
    return ENVIRONMENT.lower() == "production"
