"""Shared runtime pieces: context, errors, console and filesystem helpers."""
