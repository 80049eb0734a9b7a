import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Backend Setup
# The expense backend listens on :8080 by default.
API_BASE_URL = os.getenv("EXPENSE_API_URL", "http://localhost:8080").rstrip("/")
API_TIMEOUT = float(os.getenv("EXPENSE_API_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("EXPENSE_TRACKER_LOG_LEVEL")

# --- Display ---
PAGE_TITLE = "My Expense Tracker"
