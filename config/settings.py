"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Machine-specific overrides go in .env or the environment, NOT here
- Import these settings in modules: from config.settings import FEED_URL
- Constants that are not user tunables live in each package's constants.py
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# FEED CONFIGURATION
# =============================================================================

# NASA "Spot the Station" RSS feed for the deployment location
FEED_URL = os.getenv(
    "FEED_URL",
    "https://spotthestation.nasa.gov/sightings/xml_files/"
    "United_States_California_Redwood_City.xml",
)

# Timezone the feed's local date/time strings are written in
FEED_TIMEZONE = os.getenv("FEED_TIMEZONE", "America/Los_Angeles")

# Only feed items whose title contains this marker are sightings
FEED_TITLE_MARKER = "ISS Sighting"

# HTTP settings for fetching the feed
FEED_HTTP_TIMEOUT = float(os.getenv("FEED_HTTP_TIMEOUT", "30"))  # seconds
FEED_USER_AGENT = "iss-notify/1.0"

# Pause between poll cycles once a feed's sightings are exhausted
# 0 = re-poll immediately
FEED_REPOLL_DELAY = float(os.getenv("FEED_REPOLL_DELAY", "0"))  # seconds

# =============================================================================
# NOTIFICATION CONFIGURATION
# =============================================================================

# How long before a sighting the approach animation starts
NOTIFY_LEAD_SECONDS = int(os.getenv("NOTIFY_LEAD_SECONDS", "300"))  # 5 minutes

# =============================================================================
# LED STRIP CONFIGURATION
# =============================================================================

# "auto" (Blinkt! if present, mock otherwise), "real" or "mock"
LED_STRIP_MODE = os.getenv("LED_STRIP_MODE", "auto")

LED_PIXEL_COUNT = 8  # Blinkt! has 8 APA102 pixels
LED_BRIGHTNESS = float(os.getenv("LED_BRIGHTNESS", "0.05"))  # 0.0 to 1.0

# Idle heartbeat tick (also the command receive timeout)
LED_REFRESH_INTERVAL = 1.0  # seconds

# Pause between rainbow frames while a sighting is approaching
LED_FRAME_INTERVAL = 0.01  # seconds

# =============================================================================
# SERVICE CONFIGURATION
# =============================================================================

# Logging Configuration
LOG_FILE = os.getenv("LOG_FILE", "iss-notify.log")
LOG_FALLBACK_DIR = "logs"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
