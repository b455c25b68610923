"""
Core configuration and environment variables
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Environment Variables
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")
FIREBASE_KEY_FILE = os.getenv("FIREBASE_KEY_FILE", "firebase-key.json")
FIRESTORE_PROJECT = os.getenv("FIRESTORE_PROJECT")
EXCHANGE_RATE_API_KEY = os.getenv("EXCHANGE_RATE_API_KEY")
EXCHANGE_RATE_TTL_SECONDS = int(os.getenv("EXCHANGE_RATE_TTL_SECONDS", "3600"))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SUPPORTED_CURRENCIES = ["USD", "INR", "EUR", "GBP", "JPY", "CAD", "AUD"]
