"""
Arena logging.

Console logging with per-module levels, plus structured match records
routed to per-module sinks.

Usage:
    from arena.logging import get_logger

    log = get_logger('match')
    log.info("Match started")

    from arena.logging import emit_record
    emit_record('match', {'type': 'MatchEnded', 'scores': {'red': 45, 'blue': 30}})

Environment variables:
    ARENA_LOG_LEVEL=DEBUG               # default console level
    ARENA_LOG_MATCH=DEBUG               # console level for one module
    ARENA_LOG_DIR=/tmp/arena-logs       # where FileSink writes
    ARENA_LOGGING_MATCH_ENABLED=true    # write 'match' records to disk
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_NAMES = {
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'OFF': LogLevel.OFF,
}

_TRUTHY = ('true', '1', 'yes', 'on')

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,            # None = platform default
    'enabled_sinks': set(),     # modules whose records go to a FileSink
}


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for a module."""

    @abstractmethod
    def close(self) -> None:
        """Release any open resources."""


class FileSink(LogSink):
    """
    Writes records as JSON Lines, one file per module.

    Each file opens with a header line and is closed with a footer line.

    Args:
        log_dir: Directory for log files (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _open(self, module: str) -> TextIO:
        if module not in self._files:
            if self._log_dir is None:
                self._log_dir = Path(get_log_dir())
            self._log_dir.mkdir(parents=True, exist_ok=True)
            path = self._log_dir / f"{self._session_name}_{module}.jsonl"
            f = open(path, 'a')
            f.write(json.dumps({
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            }) + "\n")
            self._files[module] = f
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._open(module).write(json.dumps(record) + "\n")

    def close(self) -> None:
        for module, f in self._files.items():
            f.write(json.dumps({'type': 'footer', 'module': module, 'end_time': time.time()}) + "\n")
            f.close()
        self._files.clear()


class NullSink(LogSink):
    """Discards everything."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route a module's records to `sink`, replacing any earlier one."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a structured record to the module's sink.

    Returns:
        True if a sink received the record, False if none is registered
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_environment(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if ARENA_LOGGING_<MODULE>_ENABLED is set, otherwise NullSink."""
    if module.lower() not in _config['enabled_sinks']:
        return NullSink()
    return FileSink(session_name=session_name)


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (set from ARENA_LOG_DIR on import)
    2. ARENA_LOG_DIR environment variable
    3. Platform user data directory:
       - macOS: ~/Library/Application Support/Arena/logs
       - Windows: %APPDATA%/Arena/logs
       - Linux: $XDG_DATA_HOME/arena/logs
    """
    if _config['log_dir']:
        return str(Path(_config['log_dir']).expanduser())

    env_dir = os.environ.get('ARENA_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Arena'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Arena'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'arena'
    return str(user_data / 'logs')


# =============================================================================
# Configuration
# =============================================================================

def _level_from_string(level_str: str) -> LogLevel:
    return _LEVEL_NAMES.get(level_str.upper(), LogLevel.INFO)


def configure_logging(level: str = 'INFO', modules: Optional[Dict[str, str]] = None) -> None:
    """
    Set the default console level and optional per-module levels.

    Unknown level names fall back to INFO.
    """
    _config['default_level'] = _level_from_string(level)
    for mod, mod_level in (modules or {}).items():
        _config['module_levels'][mod] = _level_from_string(mod_level)


def _load_env_config(environ=os.environ) -> None:
    if 'ARENA_LOG_LEVEL' in environ:
        _config['default_level'] = _level_from_string(environ['ARENA_LOG_LEVEL'])
    if 'ARENA_LOG_DIR' in environ:
        _config['log_dir'] = environ['ARENA_LOG_DIR']

    for key, value in environ.items():
        if key.startswith('ARENA_LOG_') and key not in ('ARENA_LOG_LEVEL', 'ARENA_LOG_DIR'):
            _config['module_levels'][key[len('ARENA_LOG_'):].lower()] = _level_from_string(value)
        elif key.startswith('ARENA_LOGGING_') and key.endswith('_ENABLED'):
            module = key[len('ARENA_LOGGING_'):-len('_ENABLED')].lower()
            if value.lower() in _TRUTHY:
                _config['enabled_sinks'].add(module)
            else:
                _config['enabled_sinks'].discard(module)


_load_env_config()


# =============================================================================
# Console logging
# =============================================================================

class ArenaLogger:
    """Prints `[module] LEVEL: msg` for messages at or above the module's level."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level_name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the current traceback."""
        import traceback

        self.error(msg, *args)
        tb = traceback.format_exc().strip()
        if tb and tb != 'NoneType: None':
            for line in tb.split('\n'):
                self.error(line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArenaLogger:
    """Get the cached logger for a module (e.g. 'match', 'game_mode', 'skin')."""
    return ArenaLogger(module)
