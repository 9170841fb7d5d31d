"""
Environment configuration module
Loads optional settings from the environment (and .env for local runs).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Optional environment variables (with defaults)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
VOCABULARY_PATH = Path(
    os.getenv('VOCABULARY_PATH', str(Path(__file__).resolve().parent / 'data' / 'vocabularies.yaml'))
)
EXPORT_DIR = Path(os.getenv('EXPORT_DIR', '.'))
PORT = int(os.getenv('PORT', '5000'))
