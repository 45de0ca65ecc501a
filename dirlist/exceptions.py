"""Custom exception classes for directory listing."""


class DirListException(Exception):
    """
    Base exception class for all listing errors.
    """
    pass


class RegistryNameNotFound(DirListException):
    """
    Raised when a logical location name has no registry entry.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Directory object {name} does not exist.")


class PathNotFound(DirListException):
    """
    Raised when a resolved or given path does not exist on the filesystem.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory: {path} does not exist.")


class NotADirectory(DirListException):
    """
    Raised when a path exists but is not a directory.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path: {path} is not a directory.")


class EnumerationIOError(DirListException):
    """
    Raised when enumerating a validated directory fails with an I/O error.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Failed to enumerate directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
