# tinylink/config.py
import os

DATABASE_URL = os.getenv("TINYLINK_DATABASE_URL", "sqlite:///./tinylink.db")
LOG_LEVEL = os.getenv("TINYLINK_LOG_LEVEL", "INFO").upper()

# Anonymous identity cookie
COOKIE_NAME = os.getenv("TINYLINK_COOKIE_NAME", "tinylink_user_id")
COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # 1 year, seconds

# Short codes
CODE_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
CODE_LENGTH = 7
CODE_PATTERN = r"^[a-z0-9]{6,8}$"
MAX_GENERATION_ATTEMPTS = 10
