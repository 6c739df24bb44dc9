"""
Safe I/O operations with atomic writes and cooperative file locking.
"""

import contextlib
import errno
import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

try:  # fcntl is only available on POSIX platforms
    import fcntl  # type: ignore
except ImportError:  # pragma: no cover - Windows fallback
    fcntl = None  # type: ignore


logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 8.0  # seconds
LOCK_SLEEP_INTERVAL = 0.05  # seconds


def _lock_file_path(path: Path) -> Path:
    """Return the companion lock file path for the target file."""
    lock_name = f"{path.name}.lock"
    return path.parent / lock_name


@contextlib.contextmanager
def _file_lock(target_path: Path, exclusive: bool, timeout: float = DEFAULT_LOCK_TIMEOUT) -> Iterator[None]:
    """Acquire a cooperative file lock around the target path.

    Uses POSIX advisory locking via fcntl when available; otherwise acts as a no-op.
    """
    if fcntl is None:
        yield
        return

    lock_path = _lock_file_path(target_path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    lock_type = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
    deadline = time.monotonic() + timeout if timeout is not None else None

    with open(lock_path, "a") as lock_file:
        while True:
            try:
                flags = lock_type | fcntl.LOCK_NB if deadline is not None else lock_type
                fcntl.flock(lock_file.fileno(), flags)
                break
            except OSError as exc:  # pragma: no cover - depends on timing
                if exc.errno not in (errno.EACCES, errno.EAGAIN):
                    raise
                if deadline is not None and time.monotonic() >= deadline:
                    raise TimeoutError(f"Timed out waiting for lock on {target_path}") from exc
                time.sleep(LOCK_SLEEP_INTERVAL)

        try:
            yield
        finally:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)


def read_json(file_path: str, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> Any:
    """
    Read JSON from file under a shared lock.

    Unlike ``safe_read_json`` this lets errors propagate, so callers can
    tell a missing file from a corrupt one.

    Raises:
        FileNotFoundError, OSError, json.JSONDecodeError, TimeoutError
    """
    path_obj = Path(os.path.expanduser(file_path))
    with _file_lock(path_obj, exclusive=False, timeout=lock_timeout):
        with path_obj.open('r', encoding='utf-8') as handle:
            return json.load(handle)


def safe_read_json(file_path: str, default: Optional[Dict] = None, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> Dict[str, Any]:
    """
    Safely read JSON from file with error handling.

    Args:
        file_path: Path to JSON file
        default: Default value to return if file doesn't exist or is invalid

    Returns:
        Parsed JSON data or default value
    """
    if default is None:
        default = {}

    file_path = os.path.expanduser(file_path)
    path_obj = Path(file_path)

    if not path_obj.exists():
        return default

    try:
        return read_json(file_path, lock_timeout=lock_timeout)
    except TimeoutError as exc:
        logger.warning("Timed out waiting to read %s: %s", file_path, exc)
        return default
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read %s: %s", file_path, exc)
        return default


def safe_write_json(file_path: str, data: Dict[str, Any], indent: int = 2, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> bool:
    """
    Safely write JSON to file with atomic write.

    Args:
        file_path: Path to write to
        data: Data to write
        indent: JSON indentation level

    Returns:
        True if successful, False otherwise
    """
    try:
        content = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.error("Error serialising data for %s: %s", file_path, exc)
        return False

    return atomic_write(file_path, content, lock_timeout=lock_timeout)


def atomic_write(file_path: str, content: str, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> bool:
    """
    Atomically write content to file.

    Args:
        file_path: Path to write to
        content: Content to write

    Returns:
        True if successful, False otherwise
    """
    file_path = os.path.expanduser(file_path)
    path_obj = Path(file_path)

    tmp_path = None
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        with _file_lock(path_obj, exclusive=True, timeout=lock_timeout):
            with tempfile.NamedTemporaryFile(
                mode='w',
                dir=str(path_obj.parent),
                prefix='.tmp_',
                delete=False,
                encoding='utf-8'
            ) as tmp_file:
                tmp_file.write(content)
                tmp_path = Path(tmp_file.name)

            os.replace(str(tmp_path), str(path_obj))
        return True

    except TimeoutError as exc:
        logger.error("Error writing to %s: %s", file_path, exc)
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Error writing to %s: %s", file_path, exc)
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass

    return False


def remove_file(file_path: str) -> bool:
    """Delete a file and its lock companion; True if the file existed."""
    path_obj = Path(os.path.expanduser(file_path))
    existed = path_obj.exists()
    for target in (path_obj, _lock_file_path(path_obj)):
        try:
            target.unlink()
        except FileNotFoundError:
            pass
    return existed
