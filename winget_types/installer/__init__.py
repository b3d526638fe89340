"""Value types and enumerations used in WinGet installer manifests."""