"""
Configuration constants for the World Hub core.
Centralized configuration for analysis windows, thresholds, and logging.
"""

import os
from pathlib import Path
from typing import Tuple

# Analysis windows
ANALYSIS_WINDOW_DAYS = 30  # Records kept for the detail view KPIs
WEEK_WINDOW_DAYS = 7  # Records per "this week" / "last week" bucket
TREND_SMA_WINDOW = 5  # Smoothing window for the trend sparkline
TOP_N = 3  # Size of the "top" rankings (meditation types, exercises)

# Quality / mood ratings
QUALITY_SCALE: Tuple[int, int] = (1, 5)
GOOD_QUALITY_THRESHOLD = 4  # Nights rated >= 4/5 count as good sleep

# Navigation
DEFAULT_PROGRAMS_DOMAIN = "exercise"

# Date Formats
DAY_KEY_FORMAT = "%Y-%m-%d"

# Logging
LOG_LEVEL = os.environ.get("WORLDHUB_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIR = Path(os.environ.get("WORLDHUB_LOG_DIR", Path(__file__).parent.parent / "logs"))
LOG_TO_FILE = os.environ.get("WORLDHUB_LOG_TO_FILE", "1") != "0"
