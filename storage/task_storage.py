r"""Local storage for tasks.

One task per line, three tab separated fields::

    <created_at epoch ms>\t<0|1>\t<text>

Tabs inside the text are written as a single space and newlines as the two
characters backslash + n. Reading only turns backslash + n back into a
newline, so tabs do not survive a round trip and a literal "\n" typed by the
user comes back as a line break.
"""
import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from constants import DATA_FILE_NAME
from models.task import Task

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class TaskFileError(ValueError):
    """Tasks file has a line that cannot be parsed"""

    def __init__(self, message: str, lineno: int):
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


def escape_text(text: str) -> str:
    return text.replace("\t", " ").replace("\n", "\\n")


def unescape_text(text: str) -> str:
    return text.replace("\\n", "\n")


def format_line(task: Task) -> str:
    flag = "1" if task.completed else "0"
    return f"{task.created_at}\t{flag}\t{escape_text(task.text)}"


def parse_line(line: str, lineno: int = 0) -> Optional[Task]:
    """Parse one line (without its terminator).

    Returns None for lines with fewer than three fields. A timestamp that
    is not a 64-bit integer raises TaskFileError.
    """
    parts = line.split("\t", 2)
    if len(parts) < 3:
        return None
    stamp, flag, text = parts
    if not _INT_RE.match(stamp):
        raise TaskFileError(f"invalid timestamp {stamp!r}", lineno)
    created_at = int(stamp)
    if not _INT64_MIN <= created_at <= _INT64_MAX:
        raise TaskFileError(f"timestamp out of range {stamp!r}", lineno)
    return Task(text=unescape_text(text), completed=flag == "1", created_at=created_at)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _fsync_dir(directory: Path):
    """Make a rename inside ``directory`` durable (POSIX only)"""
    if not hasattr(os, "O_DIRECTORY"):
        return
    fd = os.open(directory, os.O_RDONLY | os.O_DIRECTORY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


class TaskStorage:
    """Handles task persistence to a local text file"""

    def __init__(self, path: Path = None):
        if path is None:
            path = Path.home() / DATA_FILE_NAME
        self.path = Path(path)

    def load_tasks(self) -> List[Task]:
        """Load tasks from the file; a missing file means no tasks yet"""
        if not self.path.exists():
            logger.info("No tasks file at %s, starting empty", self.path)
            return []

        tasks = []
        # bytes.splitlines 只按 \n, \r, \r\n 分行
        for lineno, raw in enumerate(self.path.read_bytes().splitlines(), start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise TaskFileError(f"invalid UTF-8 ({e.reason})", lineno) from e
            task = parse_line(line, lineno)
            if task is None:
                logger.debug("Skipping malformed line %d in %s", lineno, self.path)
                continue
            tasks.append(task)
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]):
        """Overwrite the file with ``tasks`` in order.

        Written to a temp file next to the target and moved into place, so an
        interrupted save leaves the previous file intact. OSError propagates.
        """
        lines = [format_line(t) for t in tasks]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with open(fd, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
                f.flush()
                os.fsync(f.fileno())
            # mkstemp 建的是 0600，沿用原文件权限，新文件按 umask
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            else:
                os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        _fsync_dir(self.path.parent)
        logger.info("Saved %d tasks to %s", len(lines), self.path)
