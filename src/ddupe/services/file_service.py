"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal for the deletion workflows: permanent unlink or move to the
system trash (via send2trash).
"""
import os
from pathlib import Path
from typing import Union

from send2trash import send2trash


class FileService:
    """
    Removes one file at a time. Errors propagate as OSError so that the
    caller can classify them per file.
    """

    def __init__(self, use_trash: bool = False):
        self.use_trash = use_trash

    def remove(self, file_path: Union[str, Path]) -> None:
        """Deletes or trashes a file depending on how the service was built."""
        if self.use_trash:
            self.move_to_trash(file_path)
        else:
            self.delete_file(file_path)

    @staticmethod
    def delete_file(file_path: Union[str, Path]) -> None:
        """Permanently removes a file."""
        os.remove(file_path)

    @staticmethod
    def move_to_trash(file_path: Union[str, Path]) -> None:
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        send2trash(str(path))
