"""
Keybind configuration loading.

Sources are tried in order: the user's config file, the system-wide config
file, then the built-in defaults. A source is only used when it reads,
parses, validates and contains at least one keybind. Anything else falls
through to the next source without surfacing an error.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from . import APP_NAME
from .error_handler_util import ErrorHandlerUtil
from .keybinds import Keybind, default_keybinds

error_context = ErrorHandlerUtil.create_error_context("Config")
logger = error_context.logger

CONFIG_FILENAME = "config.toml"
SYSTEM_CONFIG_PATH = Path("/usr/share") / APP_NAME / CONFIG_FILENAME

# TOML field name -> Keybind attribute
KEYBIND_FIELDS = (
    ('keys', 'keys'),
    ('name', 'name'),
    ('desc', 'description'),
)


class ConfigEnvironment:
    """
    Process environment and filesystem access used during config resolution.

    Tests pass a subclass backed by dictionaries instead of the real process.
    """

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding='utf-8')


@dataclass(frozen=True)
class FieldError:
    """A single validation problem, located by a dotted/indexed field path."""

    field: str
    message: str

    def __str__(self):
        return f"{self.field}: {self.message}"


@dataclass
class ConfigValidationResult:
    """Typed result of validating a parsed config document."""

    keybinds: List[Keybind] = field(default_factory=list)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _type_name(value: Any) -> str:
    return type(value).__name__


def validate_config(data: Any) -> ConfigValidationResult:
    """
    Validate a decoded config document.

    The document must hold a ``keybinds`` array of tables, each with string
    ``keys``, ``name`` and ``desc`` fields. Extra fields are ignored. A single
    error invalidates the whole document, so ``keybinds`` is empty whenever
    ``errors`` is not.
    """
    errors: List[FieldError] = []

    if not isinstance(data, dict):
        return ConfigValidationResult(errors=[FieldError("<document>", f"expected a table, got {_type_name(data)}")])

    if 'keybinds' not in data:
        return ConfigValidationResult(errors=[FieldError("keybinds", "missing required field")])

    entries = data['keybinds']
    if not isinstance(entries, list):
        return ConfigValidationResult(errors=[FieldError("keybinds", f"expected an array, got {_type_name(entries)}")])

    keybinds = []
    for index, entry in enumerate(entries):
        path = f"keybinds[{index}]"
        if not isinstance(entry, dict):
            errors.append(FieldError(path, f"expected a table, got {_type_name(entry)}"))
            continue

        values = {}
        for toml_name, attr_name in KEYBIND_FIELDS:
            if toml_name not in entry:
                errors.append(FieldError(f"{path}.{toml_name}", "missing required field"))
            elif not isinstance(entry[toml_name], str):
                errors.append(FieldError(f"{path}.{toml_name}",
                                         f"expected a string, got {_type_name(entry[toml_name])}"))
            else:
                values[attr_name] = entry[toml_name]

        if len(values) == len(KEYBIND_FIELDS):
            keybinds.append(Keybind(**values))

    if errors:
        return ConfigValidationResult(errors=errors)
    return ConfigValidationResult(keybinds=keybinds)


def parse_config_text(text: str) -> ConfigValidationResult:
    """Decode TOML text and validate it. Syntax errors become a ``<document>`` error."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        return ConfigValidationResult(errors=[FieldError("<document>", str(e))])
    return validate_config(data)


def user_config_dir(env: ConfigEnvironment) -> Optional[Path]:
    """Base config directory: $XDG_CONFIG_HOME, else $HOME/.config, else None."""
    xdg_config_home = env.getenv('XDG_CONFIG_HOME')
    if xdg_config_home:
        return Path(xdg_config_home)
    home = env.getenv('HOME')
    if home:
        return Path(home) / '.config'
    return None


def resolve_config_paths(env: ConfigEnvironment) -> List[Path]:
    """Return candidate config files, most specific first."""
    paths = []
    base = user_config_dir(env)
    if base is not None:
        paths.append(base / APP_NAME / CONFIG_FILENAME)
    paths.append(SYSTEM_CONFIG_PATH)
    return paths


def load_config_file(path: Path, env: ConfigEnvironment) -> Optional[List[Keybind]]:
    """
    Read one config file. Returns its keybinds, or None if the file
    can't be used (unreadable, invalid, or empty).
    """
    text = error_context.handle_with_fallback(
        lambda: env.read_text(path),
        fallback_value=None,
        error_message=f"Could not read {path}",
        log_level=logging.DEBUG
    )
    if text is None:
        return None

    result = parse_config_text(text)
    if not result.ok:
        logger.debug(f"Ignoring {path}: {'; '.join(str(e) for e in result.errors)}")
        return None

    if not result.keybinds:
        logger.debug(f"Ignoring {path}: no keybinds defined")
        return None

    return result.keybinds


def load_keybinds(env: Optional[ConfigEnvironment] = None) -> List[Keybind]:
    """Load keybinds from the first usable config source, or the defaults."""
    env = env or ConfigEnvironment()

    for path in resolve_config_paths(env):
        keybinds = load_config_file(path, env)
        if keybinds is not None:
            logger.info(f"Loaded {len(keybinds)} keybinds from {path}")
            return keybinds

    logger.info("No usable config found, using built-in keybinds")
    return default_keybinds()
