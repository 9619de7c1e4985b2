class RenameError(Exception):
    """Base class for every failure raised while planning or applying renames."""


class DirectoryUnreadable(RenameError):
    def __init__(self, folder: str, reason: OSError):
        self.folder = folder
        self.reason = reason
        super().__init__(f"Cannot read directory {folder}: {reason}")


class DuplicateTarget(RenameError):
    def __init__(self, kind: str, target: str):
        self.kind = kind
        self.target = target
        super().__init__(f"Target {kind} path {target} is duplicated!")


class MoveFailed(RenameError):
    def __init__(self, src: str, dst: str, reason: str):
        self.src = src
        self.dst = dst
        self.reason = reason
        super().__init__(f"Failed to move {src} -> {dst}: {reason}")
