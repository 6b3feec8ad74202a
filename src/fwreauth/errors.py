from __future__ import annotations


class FwreauthError(Exception):
    pass


class UnsupportedPlatformError(FwreauthError):
    pass


class PrivilegeError(FwreauthError):
    pass


class MissingBinaryError(FwreauthError):
    def __init__(self, path: str, binary_name: str):
        self.path = path
        self.binary_name = binary_name
        super().__init__(f"{binary_name} binary not found at {path}")
