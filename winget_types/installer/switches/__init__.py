"""Installer switches and the set of switches passed to an installer."""