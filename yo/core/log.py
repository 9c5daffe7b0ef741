"""Append-only commit history log."""

from pathlib import Path

from yo.exceptions import IOFailure, LogUnavailable


class HistoryLog:
    """Human-readable commit log, appended to once per commit."""

    def __init__(self, log_file: Path):
        self.log_file = Path(log_file)

    def append(self, record: str) -> None:
        """
        Append one record to the end of the log, creating it if needed.

        Raises:
            IOFailure: If the log cannot be opened or written
        """
        try:
            with open(self.log_file, 'a', encoding='utf-8', errors='surrogateescape') as f:
                f.write(record)
        except OSError as e:
            raise IOFailure("failed to write log entry", e) from e

    def read(self) -> str:
        """
        Read the whole log, oldest record first.

        Raises:
            LogUnavailable: If no commit has been made yet
            IOFailure: If the log exists but cannot be read
        """
        try:
            return self.log_file.read_text(encoding='utf-8', errors='surrogateescape')
        except FileNotFoundError as e:
            raise LogUnavailable("failed to read log file", e) from e
        except OSError as e:
            raise IOFailure("failed to read log file", e) from e

    def exists(self) -> bool:
        return self.log_file.is_file()

    def __repr__(self) -> str:
        return f"HistoryLog(path={self.log_file})"
