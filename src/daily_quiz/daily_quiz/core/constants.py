"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Kolkata"
DEFAULT_SESSION_DAYS = 1
MIN_PASSWORD_LENGTH = 6

STUDENT_EMAIL_DOMAIN = "@btech.christuniversity.in"
FACULTY_EMAIL_DOMAIN = "@christuniversity.in"

OPTION_FIELDS = ("option1", "option2", "option3", "option4")
