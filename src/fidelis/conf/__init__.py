''' Per-module configuration.

    A value is looked up in the module's INI section first (the files listed
    in FIDELIS_CONFIG_FILE), then in the module's `defaults`, then in
    `sysdefaults`. Only UPPERCASE names are configuration values. The type of
    the default decides how the INI text is read; lists and dicts are JSON.

        [fidelis.reconcile]
        AMOUNT_BAND_MIN = 400000
        LENDER_NAME_KEYWORDS = ["auto", "vehicle", "car", "motor", "wheels"]
'''
import configparser
import json
import logging
import os
import re

from typing import Any, Callable, Dict

from . import sysdefaults


def env(name: str, defval: Any, coercer: Callable[[Any], Any] = None):
    value = os.environ.get(name, defval)
    return coercer(value) if callable(coercer) else value


FIDELIS_SYSTEM_DEFAULTS = env("FIDELIS_SYSTEM_DEFAULTS", "sysdefaults")
FIDELIS_CONFIG_FILES = env("FIDELIS_CONFIG_FILE", "base.ini|config.ini").split('|')
DEBUG_ALL_CONFIG_VALUE = "#ALL"

RX_INVALID_OPTION = re.compile(r"[^A-Za-z\d_]+")

_parser = configparser.ConfigParser(interpolation=None)
_parser.optionxform = lambda s: RX_INVALID_OPTION.sub("_", s.strip()).upper()

# Missing files are skipped, so a deployment may ship any subset of them.
_parser.read(FIDELIS_CONFIG_FILES)

_configs: Dict[str, "ModuleConfig"] = {}


def _read_option(section, key, default):
    ''' Read `key` typed after `default`. Raises NoOptionError when unset. '''
    # bool is a subclass of int
    if isinstance(default, bool):
        return _parser.getboolean(section, key)

    if isinstance(default, int):
        return _parser.getint(section, key)

    if isinstance(default, float):
        return _parser.getfloat(section, key)

    if isinstance(default, (dict, list, tuple)):
        return json.loads(_parser.get(section, key))

    if default is None or isinstance(default, str):
        return _parser.get(section, key)

    raise ValueError(f"Unsupported config value type [{type(default)}] for [{section}.{key}].")


class ModuleConfig(object):
    def __init__(self, module_name: str, *defaults):
        if module_name in _configs:
            raise RuntimeError(f"Module [{module_name}] already configured.")

        if not _parser.has_section(module_name):
            _parser.add_section(module_name)

        self.__name__ = module_name
        self.__values__ = {}
        self.__sources__ = {}

        for source in defaults + (sysdefaults,):
            self._load(source)

        if sysdefaults.DEBUG_MODULE_CONFIG in (DEBUG_ALL_CONFIG_VALUE, module_name):
            self._dump()

    def _load(self, source):
        if source is None:
            return

        if isinstance(source, ModuleConfig):
            items = source.items()
        else:
            items = vars(source).items()

        origin = getattr(source, '__name__', '<unnamed>')
        for key, default in items:
            if not key.isupper() or key in self.__values__:
                continue

            try:
                self.__values__[key] = _read_option(self.__name__, key, default)
                self.__sources__[key] = '|'.join(FIDELIS_CONFIG_FILES)
            except configparser.NoOptionError:
                self.__values__[key] = default
                self.__sources__[key] = origin

    def _dump(self):
        logging.debug("=== CONFIG [%s] ===", self.__name__)
        for key, value in self.__values__.items():
            logging.debug(" - [%s] %r (from %s)", key, value, self.__sources__[key])

    def __getattr__(self, name):
        try:
            return self.__values__[name]
        except KeyError:
            raise AttributeError(f"Config [{self.__name__}] has no value [{name}]") from None

    def __getitem__(self, name):
        return self.__values__[name]

    def get(self, name, default=None):
        return self.__values__.get(name, default)

    def items(self):
        yield from self.__values__.items()

    def keys(self):
        yield from self.__values__.keys()

    def values(self):
        yield from self.__values__.values()

    def as_dict(self):
        return dict(self.__values__)


def getConfig(config_key: str, *defaults) -> ModuleConfig:
    if config_key not in _configs:
        _configs[config_key] = ModuleConfig(config_key, *defaults)

    return _configs[config_key]


default_config = getConfig(FIDELIS_SYSTEM_DEFAULTS, sysdefaults)
