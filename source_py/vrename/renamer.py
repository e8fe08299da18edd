"""
Applying a name mapping as filesystem renames.
"""

import logging
import os
from typing import Dict, Iterable, Iterator, List

from .types import RenameError, RenameOperation


def plan_renames(name_map: Dict[str, str]) -> List[RenameOperation]:
    """Turn an old-name -> new-name mapping into rename operations."""
    return [RenameOperation(from_path=old_name, to_path=new_name)
            for old_name, new_name in name_map.items()]


def apply_renames(operations: Iterable[RenameOperation],
                  dry_run: bool = False) -> Iterator[RenameOperation]:
    """Rename each operation's source to its destination, in order.

    Yields every operation once it has been applied. The first failure
    raises RenameError and nothing after it is attempted.
    """
    for op in operations:
        if not dry_run:
            try:
                os.rename(op.from_path, op.to_path)
            except OSError as e:
                logging.debug(f"Failed to rename: {op.from_path} -> {op.to_path}: {e}")
                raise RenameError(op.from_path, op.to_path, e) from e
            logging.info(f"Renamed: {op.from_path} -> {op.to_path}")
        yield op
