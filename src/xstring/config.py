"""
Package configuration: packaged YAML defaults, optionally updated by a user
config file.
"""

# std
import copy
from pathlib import Path
from collections import abc

# third-party
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
CACHE = {}
PACKAGE = 'xstring'
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    import yaml

    with filename.open('r') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
}


def load(filename):
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if (path := Path(filename)).exists():
        logger.debug('Loading config file: {!s}', path)
        return CONFIG_PARSERS[path.suffix.lstrip('.')](path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def user_config_file():
    return user_config_path(PACKAGE) / FILENAME


def _update(base, new):
    # nested update of mapping `base` with items from `new`
    for key, val in new.items():
        if isinstance(val, abc.Mapping) and isinstance(base.get(key), abc.Mapping):
            _update(base[key], val)
        else:
            base[key] = val
    return base


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Dictionary with item read access through attribute lookup. Nested mappings
    are converted to `ConfigNode` so that `CONFIG.split.delimiter` works.
    """

    @classmethod
    def load(cls, filename=None, defaults=DEFAULTS):
        assert filename or defaults
        # cached defaults are never mutated by the update
        config = copy.deepcopy(load(defaults)) if defaults else {}
        if filename and Path(filename).exists():
            user = load(filename)
            if not isinstance(user, abc.Mapping):
                raise TypeError(
                    f'Invalid {PACKAGE} config file {filename!s}: expected a '
                    f'mapping at the top level, not {type(user).__name__!r}.'
                )

            logger.info('Updating {} config from user file: {!s}.',
                        PACKAGE, filename)
            _update(config, user)
        return cls(config)

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in self.items():
            if isinstance(val, abc.Mapping) and not isinstance(val, ConfigNode):
                self[key] = type(self)(val)

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load(user_config_file())
