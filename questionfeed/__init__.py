import time

__version__ = "0.1.0"

# start marker for /api/health uptime; every entry point imports the package first
STARTED_AT = time.monotonic()
