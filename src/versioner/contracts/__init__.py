"""JSON schema contracts for command options, manifests and command output."""
