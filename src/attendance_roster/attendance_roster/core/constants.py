"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

MANUAL_ID_PREFIX = "manual-"
DATE_FORMAT = "%Y-%m-%d"

EMPLOYEES_ROUTES = ("/api/employees", "/.netlify/functions/employees")

CORS_ALLOW_HEADERS = "Content-Type"
CORS_ALLOW_METHODS = "GET,POST,PATCH,DELETE,OPTIONS"
