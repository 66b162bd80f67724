"""Package metadata for outdir_tempdir."""

__app_name__ = "outdir-tempdir"
__version__ = "0.1.0"
__description__ = "Sandboxed, path-sanitized temporary directories for test harnesses."
__license_type__ = "MIT"

__all__ = [
    "__app_name__",
    "__description__",
    "__license_type__",
    "__version__",
]
