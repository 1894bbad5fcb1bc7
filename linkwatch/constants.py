"""Fixed settings for LinkWatch."""

# Probe target and schedule
TARGET_URL = "https://8.8.8.8"  # Google Public DNS
MONITOR_INTERVAL_MS = 5000
PROBE_TIMEOUT_S = 30.0

# Keep one day of history at the default interval
RETENTION_SAMPLES = 24 * 60 * 60 * 1000 // MONITOR_INTERVAL_MS

# Sample table
MAX_TABLE_ROWS = 300

# Chart styling
STATUS_COLOR = (75, 192, 192)
LATENCY_COLOR = (255, 99, 132)
TIME_LABEL_FORMAT = "%H:%M:%S"
