import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()
LOG_FILE = os.getenv('LOG_FILE_PATH')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# --- Logging Configuration ---
handlers = [
    # Console Handler (for quick viewing in terminal)
    logging.StreamHandler(),
]
if LOG_FILE:
    # File Handler (only when a path is configured)
    handlers.append(logging.FileHandler(LOG_FILE, mode='a', encoding='utf-8'))

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    handlers=handlers
)

# Export a logger instance for the whole service
puzzle_logger = logging.getLogger("PUZZLE_SUBMISSIONS")
