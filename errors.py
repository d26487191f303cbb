# errors.py


class AhashError(Exception):
    """Base class for fatal errors that end a run."""


class GlobPatternError(AhashError):
    pass


class HashError(AhashError):
    def __init__(self, filepath, cause):
        super().__init__(f"Failed to hash {filepath}: {cause}")
        self.filepath = filepath
        self.cause = cause


class ReportError(AhashError):
    pass
