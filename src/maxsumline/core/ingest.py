import logging
import os
from pathlib import Path, PurePosixPath, PureWindowsPath

from maxsumline import config
from maxsumline.errors import FileAccessError, InvalidPathError
from maxsumline.models import NumberedLines


LOGGER = logging.getLogger(__name__)


def is_path_valid(path: str, platform_name: str = os.name) -> bool:
    if not isinstance(path, str) or not path:
        return False
    if "\x00" in path:
        return False

    if platform_name == "nt":
        if any(char in config.WINDOWS_INVALID_PATH_CHARS for char in path):
            return False
        if any(ord(char) < 32 for char in path):
            return False
        # Only a drive prefix such as "C:" may carry a colon.
        drive_colon = len(path) >= 2 and path[1] == ":" and path[0].isalpha()
        if ":" in (path[2:] if drive_colon else path):
            return False
        return bool(PureWindowsPath(path).anchor)

    return PurePosixPath(path).is_absolute()


def read_numbered_lines(path: str) -> NumberedLines:
    if not is_path_valid(path):
        raise InvalidPathError(
            f"path contains invalid path characters or is not absolute: {path!r}"
        )

    file_path = Path(path)
    try:
        readable = file_path.is_file() and os.access(file_path, os.R_OK)
    except OSError as exc:
        raise InvalidPathError(f"path cannot be used to locate a file: {path!r}") from exc
    if not readable:
        raise FileAccessError(
            f'File "{file_path.name}" does not exist by the provided path {path} '
            "or you do not have permissions to access it."
        )

    lines: NumberedLines = {}
    try:
        with open(
            file_path,
            "r",
            encoding=config.FILE_ENCODING,
            errors=config.FILE_DECODE_ERRORS,
            newline=None,
        ) as handle:
            for line_number, line in enumerate(handle, start=1):
                lines[line_number] = line[:-1] if line.endswith("\n") else line
    except OSError as exc:
        raise FileAccessError(
            f'File "{file_path.name}" could not be read from the provided path {path}.'
        ) from exc

    LOGGER.debug("Lines read from %s: %d", file_path.name, len(lines))
    return lines
