"""Global pytest configuration."""

import os

# Tests never talk to the real Places API or Redis
os.environ.setdefault("PLACES_API_KEY", "")
os.environ.setdefault("REDIS_URL", "")
