"""
Type definitions, data structures and exceptions for vrename.
"""

from dataclasses import dataclass
from typing import List, Optional


class VRenameError(Exception):
    """Base class for every error vrename reports to the user."""


class NameFileError(VRenameError):
    """The temporary name file could not be created, written or read."""


class LineCountMismatchError(VRenameError):
    """The number of names in the edited name file changed."""

    def __init__(self, old_names: List[str], new_names: List[str]):
        super().__init__(
            "cannot map old names to new names "
            "(number of lines in name file changed)"
        )
        self.old_names = old_names
        self.new_names = new_names


class EditorError(VRenameError):
    """The preferred text editor is missing, could not start, or failed."""


class RenameError(VRenameError):
    """A single rename failed; the rest of the batch was not attempted."""

    def __init__(self, old_name: str, new_name: str, cause: OSError):
        super().__init__(f"failed to rename {old_name} to {new_name}: {cause}")
        self.old_name = old_name
        self.new_name = new_name
        self.cause = cause


@dataclass
class RenameOperation:
    """Represents a file rename operation."""
    from_path: str
    to_path: str

    @property
    def changed(self) -> bool:
        return self.from_path != self.to_path


@dataclass
class Config:
    """Application configuration."""
    file_names: List[str]
    editor: str
    dry_run: bool
    json: bool
    plain: bool
    verbose: bool
    log_file: Optional[str]
