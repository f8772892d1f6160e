"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# YouTube API
YOUTUBE_API_URL = os.getenv("YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3")
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY", "")
API_TIMEOUT = 30
MAX_CONCURRENT = 20

# Cache
MAX_RESULTS = 10
FRESHNESS_WINDOW = 10 * 60
IDLE_TTL = 30 * 60

# Refresh
REFRESH_INTERVAL = 5.0

# WebSocket server
WS_HOST = os.getenv("WS_HOST", "0.0.0.0")
WS_PORT = int(os.getenv("WS_PORT", "9000"))
