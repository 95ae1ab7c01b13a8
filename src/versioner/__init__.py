__version__ = "0.2.0"

__all__ = [
    "__version__",
    "bump",
    "cli",
    "contracts",
    "copyto",
    "core",
    "tsfile",
    "version",
]
