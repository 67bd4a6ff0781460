"""
Configuration for the holiday engine.
Uses .env for configuration, with environment variables taking precedence.
"""

import os

from dotenv import load_dotenv

# Load .env file (only relevant in development)
load_dotenv()

# Locale attached to holidays when the caller does not ask for one
DEFAULT_LOCALE = os.getenv("HOLIDAYS_DEFAULT_LOCALE", "en_US")

# Locale every translation mapping is expected to carry
BASE_LOCALE = os.getenv("HOLIDAYS_BASE_LOCALE", "en_US")
