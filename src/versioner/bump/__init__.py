"""`major`, `minor` and `patch` commands."""
