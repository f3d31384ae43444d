import os

# Simulated latency before weather, soil and crop data are populated
SIMULATED_DELAY_SECONDS = float(os.environ.get("SIMULATED_DELAY_SECONDS", "2.0"))

# Reference coordinate used for manual addresses and GPS fallback (New Delhi)
REFERENCE_LATITUDE = float(os.environ.get("REFERENCE_LATITUDE", "28.6139"))
REFERENCE_LONGITUDE = float(os.environ.get("REFERENCE_LONGITUDE", "77.2090"))
FALLBACK_ADDRESS = os.environ.get("FALLBACK_ADDRESS", "Delhi, India (Default)")

# In-process session registry limits
SESSION_IDLE_TTL_SECONDS = float(os.environ.get("SESSION_IDLE_TTL_SECONDS", "1800"))
MAX_SESSIONS = int(os.environ.get("MAX_SESSIONS", "500"))

DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "hi")
# Label table used for selector languages that ship without their own table
FALLBACK_LANGUAGE = os.environ.get("FALLBACK_LANGUAGE", "en")
