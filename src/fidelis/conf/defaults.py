DEBUG_APP_EXCEPTION = False

EXCHANGE_DATE_FORMAT = "%Y-%m-%d"
BUREAU_DATE_FORMAT = "%Y%m%d"

LOG_LEVEL = "info"
