"""Nested installer types, portable command aliases and nested installer files."""