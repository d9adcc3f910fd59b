''' Module loggers configured from the module config.

    LOG_LEVEL      debug, info, warning, ...
    LOG_OUTPUT     stderr, stdout, file://<path>, syslog://host[:port],
                   udp://host:port or tcp://host:port; several outputs are
                   separated by "|"
    LOG_FORMATTER  logging format; may reference {hostname}
    LOG_DATEFMT    date format of %(asctime)s
'''
import logging
import platform
import sys
from logging import handlers
from typing import Optional

from fidelis.conf import ModuleConfig, default_config, getConfig


def _syslog(host, port):
    return handlers.SysLogHandler(address=(host, port), facility=handlers.SysLogHandler.LOG_LOCAL0)


NETWORK_OUTPUTS = (
    ("syslog://", 514, _syslog),
    ("udp://", None, handlers.DatagramHandler),
    ("tcp://", None, handlers.SocketHandler),
)


def getLoggerHandler(logspec: Optional[str] = None):
    if not logspec or logspec == "stderr":
        return logging.StreamHandler(sys.stderr)

    if logspec == "stdout":
        return logging.StreamHandler(sys.stdout)

    if logspec.startswith("file://"):
        return logging.FileHandler(logspec[len("file://"):])

    for prefix, defport, factory in NETWORK_OUTPUTS:
        if logspec.startswith(prefix):
            host, _, port = logspec[len(prefix):].partition(":")
            return factory(host or "localhost", int(port) if port else defport)

    raise ValueError(f"Unsupported log output [{logspec}]")


def _outputs(log_config):
    value = log_config.get("LOG_OUTPUT")
    if not value:
        return ()

    if isinstance(value, str):
        return tuple(v.strip() for v in value.split("|") if v.strip())

    return tuple(value)


def _level(log_config):
    name = log_config.get("LOG_LEVEL")
    level = getattr(logging, name.upper(), None) if isinstance(name, str) else None
    return level if isinstance(level, int) else logging.NOTSET


def _formatter(log_config):
    fmt = log_config.get("LOG_FORMATTER")
    if not isinstance(fmt, str):
        return None

    hostname = platform.node().split(".")[0]
    return logging.Formatter(fmt.format(hostname=hostname), log_config.get("LOG_DATEFMT"))


def __closure__():
    FIDELIS_LOGGERS = dict()

    def setupLogger(module_name: Optional[str], log_config: ModuleConfig):
        module_logger = logging.getLogger(module_name)
        if log_config is None:
            return module_logger

        module_logger.setLevel(_level(log_config))

        outputs = _outputs(log_config)
        if module_name is None and not outputs:
            outputs = ("stderr",)

        formatter = _formatter(log_config)
        log_handlers = [getLoggerHandler(output) for output in outputs]
        for handler in log_handlers:
            formatter and handler.setFormatter(formatter)

        # The root logger goes through basicConfig
        if module_name is None:
            logging.basicConfig(handlers=log_handlers)
        else:
            for handler in log_handlers:
                module_logger.addHandler(handler)

        FIDELIS_LOGGERS[module_name] = module_logger
        return module_logger

    def getLogger(module_name, log_config=None):
        if module_name in FIDELIS_LOGGERS:
            return FIDELIS_LOGGERS[module_name]

        return setupLogger(module_name, log_config or getConfig(module_name))

    return getLogger, setupLogger(None, default_config)


getLogger, default_logger = __closure__()
