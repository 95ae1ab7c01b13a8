"""`create-ts`: write the manifest version as a TypeScript constant."""
