import os

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api/v1")
API_TOKEN = os.getenv("API_TOKEN")

API_CONNECT_TIMEOUT = int(os.getenv("API_CONNECT_TIMEOUT", "5"))
API_READ_TIMEOUT = int(os.getenv("API_READ_TIMEOUT", "30"))

DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID")
RECENT_TRANSACTIONS_LIMIT = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
