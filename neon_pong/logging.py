"""
Neon Pong Logging

Two channels:

- Console: per-module loggers printing ``[module] LEVEL: message``. Levels
  are set globally or per module, from code or from the environment.
- Records: structured dicts (serves, points, match results) routed to a
  sink. FileSink writes one JSONL file per module per session; with no sink
  registered, records are dropped.

Usage:
    from neon_pong.logging import emit_record, get_logger

    log = get_logger('match')
    log.info("Point to %s", side.value)
    emit_record('match', {'type': 'point', 'side': 'player'})

Environment:
    NEON_PONG_LOG_LEVEL=DEBUG               # default level
    NEON_PONG_LOG_PHYSICS=TRACE             # one module's level
    NEON_PONG_LOG_DIR=~/pong-logs           # FileSink directory
    NEON_PONG_LOGGING_MATCH_ENABLED=true    # write 'match' records to disk
"""

import json
import os
import sys
import time
import traceback
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

_LEVEL_PREFIX = 'NEON_PONG_LOG_'
_SETTINGS_PREFIX = 'NEON_PONG_LOGGING_'
_RESERVED = ('NEON_PONG_LOG_LEVEL', 'NEON_PONG_LOG_DIR')


class LogLevel(IntEnum):
    """Console levels; numeric values line up with the stdlib logging module."""
    TRACE = 5      # Per-tick detail (collisions, key changes)
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARN': LogLevel.WARNING,
    'WARNING': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},     # module -> LogLevel
    'log_dir': None,         # None = NEON_PONG_LOG_DIR or the user data dir
    'modules': {},           # module -> record settings, e.g. {'enabled': True}
}


# =============================================================================
# Record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for module."""

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """JSONL files, one per module: ``<session>_<module>.jsonl``.

    Each file opens with a header record and gets a footer record on close.
    Records without a ``wall_time`` are stamped with one.

    Args:
        log_dir: Output directory (default: get_log_dir(), resolved lazily)
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._handles: Dict[str, TextIO] = {}

    def _directory(self) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def _path(self, module: str) -> Path:
        return self._directory() / f"{self._session}_{module}.jsonl"

    def _write(self, handle: TextIO, record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def _handle(self, module: str) -> TextIO:
        handle = self._handles.get(module)
        if handle is None:
            handle = self._path(module).open('a')
            self._handles[module] = handle
            self._write(handle, {
                'type': 'header',
                'module': module,
                'session_name': self._session,
                'start_time': time.time(),
            })
        return handle

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._write(self._handle(module), record)

    def flush(self) -> None:
        for handle in self._handles.values():
            handle.flush()

    def close(self) -> None:
        for module, handle in self._handles.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._handles.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files opened so far, by module."""
        return {module: self._path(module) for module in self._handles}


class NullSink(LogSink):
    """Accepts and discards records."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    """Route module's records to sink."""
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Sink for modules without their own."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to module's sink.

    Returns:
        False if no sink is registered and the record was dropped
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink, including the default."""
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink is not None:
        _default_sink.close()
        _default_sink = None


def create_sink_for_environment(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if records are enabled for module, else NullSink."""
    if get_module_config(module).get('enabled', False):
        return FileSink(session_name=session_name)
    return NullSink()


# =============================================================================
# Configuration
# =============================================================================

def get_log_dir() -> str:
    """Directory for FileSink output.

    Configured log_dir first, then NEON_PONG_LOG_DIR, then the platform's
    user data directory (``~/.local/share/neon_pong/logs`` on Linux).
    """
    override = _config.get('log_dir') or os.environ.get('NEON_PONG_LOG_DIR')
    if override:
        return str(Path(override).expanduser())

    if sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support' / 'NeonPong'
    elif sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', str(Path.home()))) / 'NeonPong'
    else:
        base = Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'neon_pong'
    return str(base / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for module (from NEON_PONG_LOGGING_<MODULE>_<KEY>)."""
    return _config['modules'].get(module.lower(), {})


def _parse_env_value(value: str) -> Any:
    """Interpret an environment string as bool, int, float or plain str."""
    lowered = value.lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


def _parse_level(name: str) -> LogLevel:
    return _LEVEL_NAMES.get(name.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Set the default level, per-module levels and the FileSink directory."""
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Apply NEON_PONG_LOG_* levels and NEON_PONG_LOGGING_* record settings."""
    env = os.environ
    if 'NEON_PONG_LOG_LEVEL' in env:
        _config['default_level'] = _parse_level(env['NEON_PONG_LOG_LEVEL'])
    if 'NEON_PONG_LOG_DIR' in env:
        _config['log_dir'] = env['NEON_PONG_LOG_DIR']

    for key, value in env.items():
        if key.startswith(_LEVEL_PREFIX) and key not in _RESERVED:
            _config['module_levels'][key[len(_LEVEL_PREFIX):].lower()] = _parse_level(value)
        elif key.startswith(_SETTINGS_PREFIX):
            module, _, setting = key[len(_SETTINGS_PREFIX):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


_load_env_config()


def disable_logging() -> None:
    """Silence all console output."""
    _config['default_level'] = LogLevel.OFF


# =============================================================================
# Console loggers
# =============================================================================

class PongLogger:
    """Console logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        """Module level if one is set, else the default."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, label: str, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR followed by the active traceback, if any."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc()
        if tb.strip() != 'NoneType: None':
            for line in tb.rstrip().splitlines():
                self._log(LogLevel.ERROR, 'ERROR', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PongLogger:
    """Cached logger for module (same instance on every call)."""
    return PongLogger(module)
