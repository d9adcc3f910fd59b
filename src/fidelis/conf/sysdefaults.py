''' Last-resort values for every module config.

    Consulted only after the module's INI section and its `defaults`.
    A name missing from all three raises AttributeError on access.
'''

LOG_LEVEL = "info"
LOG_FORMATTER_LONG = (
    "%(asctime)s {hostname} pid=%(process)d %(levelname)-7s "
    "%(name)s (%(filename)s:%(lineno)d) %(message)s"
)
LOG_FORMATTER_SHORT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_FORMATTER = LOG_FORMATTER_SHORT
LOG_OUTPUT = None

# Dump the resolved config of a module at startup. "#ALL" dumps every module.
DEBUG_MODULE_CONFIG = None
