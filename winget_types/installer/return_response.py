"""Responses an installer may return."""

from __future__ import annotations

import enum


class ReturnResponse(enum.Enum):
    """A kind of installer return code; values are manifest names."""

    PACKAGE_IN_USE = "packageInUse"
    PACKAGE_IN_USE_BY_APPLICATION = "packageInUseByApplication"
    INSTALL_IN_PROGRESS = "installInProgress"
    FILE_IN_USE = "fileInUse"
    MISSING_DEPENDENCY = "missingDependency"
    DISK_FULL = "diskFull"
    INSUFFICIENT_MEMORY = "insufficientMemory"
    INVALID_PARAMETER = "invalidParameter"
    NO_NETWORK = "noNetwork"
    CONTACT_SUPPORT = "contactSupport"
    REBOOT_REQUIRED_TO_FINISH = "rebootRequiredToFinish"
    REBOOT_REQUIRED_FOR_INSTALL = "rebootRequiredForInstall"
    REBOOT_INITIATED = "rebootInitiated"
    CANCELLED_BY_USER = "cancelledByUser"
    ALREADY_INSTALLED = "alreadyInstalled"
    DOWNGRADE = "downgrade"
    BLOCKED_BY_POLICY = "blockedByPolicy"
    SYSTEM_NOT_SUPPORTED = "systemNotSupported"
    CUSTOM = "custom"

    def as_str(self) -> str:
        """A human-readable description of the response."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.as_str()


_DESCRIPTIONS = {
    ReturnResponse.PACKAGE_IN_USE: "Package in use",
    ReturnResponse.PACKAGE_IN_USE_BY_APPLICATION: "Package in use by application",
    ReturnResponse.INSTALL_IN_PROGRESS: "Install in progress",
    ReturnResponse.FILE_IN_USE: "File in use",
    ReturnResponse.MISSING_DEPENDENCY: "Missing dependency",
    ReturnResponse.DISK_FULL: "Disk full",
    ReturnResponse.INSUFFICIENT_MEMORY: "Insufficient memory",
    ReturnResponse.INVALID_PARAMETER: "Invalid parameter",
    ReturnResponse.NO_NETWORK: "No network",
    ReturnResponse.CONTACT_SUPPORT: "Contact support",
    ReturnResponse.REBOOT_REQUIRED_TO_FINISH: "Reboot required to finish",
    ReturnResponse.REBOOT_REQUIRED_FOR_INSTALL: "Reboot required to install",
    ReturnResponse.REBOOT_INITIATED: "Reboot initiated",
    ReturnResponse.CANCELLED_BY_USER: "Cancelled by user",
    ReturnResponse.ALREADY_INSTALLED: "Already installed",
    ReturnResponse.DOWNGRADE: "Downgrade",
    ReturnResponse.BLOCKED_BY_POLICY: "Blocked by policy",
    ReturnResponse.SYSTEM_NOT_SUPPORTED: "System not supported",
    ReturnResponse.CUSTOM: "Custom",
}