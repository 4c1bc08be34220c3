"""Errors raised by bin2txt, each mapped to a process exit status."""


class Bin2TxtError(Exception):
    exit_code = 1


class UsageError(Bin2TxtError):
    """Malformed invocation: wrong argument count, unknown flag or invalid width."""

    exit_code = 1


class SourceUnavailable(Bin2TxtError):
    exit_code = 2

    def __init__(self, path):
        super().__init__(f"{path}: file not found")
        self.path = path


class DestinationUnavailable(Bin2TxtError):
    exit_code = 3

    def __init__(self, path):
        super().__init__(f"{path}: output file no good")
        self.path = path
