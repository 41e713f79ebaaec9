"""
Values of the JSON Schema "format" keyword that change the generated type.
"""

DATE = "date"
DATE_TIME = "date-time"
TIME = "time"
DURATION = "duration"

# Legacy spelling of "duration" written by older Swagger tooling
TIME_SPAN = "time-span"

# Legacy spelling of "uuid"
GUID = "guid"
UUID = "uuid"

BASE64 = "base64"
BYTE = "byte"

DECIMAL = "decimal"

LONG = "int64"

# Non-standard spelling of "int64"
LONG_LEGACY = "long"
