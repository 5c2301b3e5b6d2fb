# file: config.py
"""
Configuration for the order service, the lookup widget and logging behavior.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# Widget / client settings
ORDER_API_URL = os.getenv("ORDER_API_URL", "http://localhost:8081").rstrip("/")

# HTTP server settings
HTTP_HOST = os.getenv("HTTP_HOST", "0.0.0.0")
HTTP_PORT = int(os.getenv("HTTP_PORT", "8081"))

# Cache settings
CACHE_CAPACITY = int(os.getenv("CACHE_CAPACITY", "100"))
CACHE_PRELOAD_LIMIT = int(os.getenv("CACHE_PRELOAD_LIMIT", "100"))

# Demo data
SEED_ORDERS = int(os.getenv("SEED_ORDERS", "50"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "order_service.log")

# Validate config
if CACHE_CAPACITY < 0:
    raise ValueError("CACHE_CAPACITY must be >= 0. Check your .env file.")

if CACHE_PRELOAD_LIMIT < 0:
    raise ValueError("CACHE_PRELOAD_LIMIT must be >= 0. Check your .env file.")

if __name__ == "__main__":
    print(f"Order API: {ORDER_API_URL}")
    print(f"Listen: {HTTP_HOST}:{HTTP_PORT}")
    print(f"Cache: capacity={CACHE_CAPACITY}, preload={CACHE_PRELOAD_LIMIT}")
