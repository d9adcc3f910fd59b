MOBILE_PATTERN = r"^[6-9]\d{9}$"
PAN_PATTERN = r"^[A-Z]{5}[0-9]{4}[A-Z]$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
EMPLOYMENT_TYPES = ["S", "N", "E", "P"]
DEFAULT_RENDER_STYLE = "full"
