"""Installer types that may be nested inside an archive."""

from __future__ import annotations

import enum


class NestedInstallerType(enum.Enum):
    """Type of the installer inside an archive; values are manifest names."""

    MSIX = "msix"
    MSI = "msi"
    APPX = "appx"
    EXE = "exe"
    INNO = "inno"
    NULLSOFT = "nullsoft"
    WIX = "wix"
    BURN = "burn"
    PORTABLE = "portable"
    FONT = "font"

    def __str__(self) -> str:
        return self.value