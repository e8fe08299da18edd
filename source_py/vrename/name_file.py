"""
The temporary name file that the user edits to rename files.

The file holds one name per line. After the editor exits, the lines are
read back and paired positionally with the original names.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence

from .types import LineCountMismatchError, NameFileError

# Lines end at "\n" only; a lone "\r" may be part of a file name
ASCII_WHITESPACE = " \t\n\r\f"


class NameFile:
    """Represents the temp file where name edits occur.

    Use it as a context manager so the temp file is removed on every exit
    path::

        with NameFile(names) as name_file:
            run_editor(editor, name_file.path)
            name_map = name_file.read_back()
    """

    def __init__(self, file_names: Sequence[str]):
        """Create the temp file with the given file names in it."""
        self.file_names = tuple(file_names)
        self._closed = False
        self._read = False

        try:
            temp_file = tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="\n",
                prefix="vrename-",
                suffix=".txt",
                delete=False,
            )
        except OSError as e:
            raise NameFileError(f"failed to open temp file: {e}") from e

        self._path = Path(temp_file.name)
        try:
            with temp_file:
                for file_name in self.file_names:
                    temp_file.write(f"{file_name}\n")
        except (OSError, UnicodeEncodeError) as e:
            self.close()
            raise NameFileError(f"failed to write to temp file: {e}") from e

        logging.debug(f"Wrote {len(self.file_names)} names to {self._path}")

    @property
    def path(self) -> Path:
        """Path to the temp file."""
        return self._path

    def read_back(self) -> Dict[str, str]:
        """Read the temp file back and map the old names to the new names.

        This consumes the name file: the temp file is removed whether or
        not the names could be mapped, and it cannot be read again.
        """
        if self._read:
            raise RuntimeError("name file has already been read back")
        self._read = True

        try:
            new_names = self._read_names()
        finally:
            self.close()

        if len(new_names) != len(self.file_names):
            old_names = list(self.file_names)
            print(f"old names: {old_names!r}", file=sys.stderr)
            print(f"new names: {new_names!r}", file=sys.stderr)
            raise LineCountMismatchError(old_names, new_names)

        # Duplicate old names keep the last pairing
        return dict(zip(self.file_names, new_names))

    def close(self) -> None:
        """Remove the temp file. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            os.remove(self._path)
        except FileNotFoundError:
            # The editor may have moved it away
            pass
        except OSError as e:
            logging.warning(f"Failed to remove temp file {self._path}: {e}")

    def _read_names(self) -> List[str]:
        new_names = []
        try:
            with open(self._path, "r", encoding="utf-8", newline="\n") as f:
                for line in f:
                    name = line.strip(ASCII_WHITESPACE)
                    if name:
                        new_names.append(name)
        except (OSError, UnicodeDecodeError) as e:
            raise NameFileError(
                f"failed to read line back from temp file: {e}"
            ) from e
        return new_names

    def __enter__(self) -> "NameFile":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
