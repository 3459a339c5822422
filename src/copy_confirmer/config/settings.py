"""Where: src/copy_confirmer/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from copy_confirmer.config.config import (
    HASH_CHUNK_SIZE_DEFAULT,
    JOBS_DEFAULT,
    Config,
)

app_config = Config.load()

# Hashing ---------------------------------------------------------------------

# BLAKE2b digest width in bytes. 64 bytes keeps accidental collisions out of
# reach for any realistic number of files.
DIGEST_SIZE: int = 64

_chunk_size = getattr(app_config, "hash_chunk_size", HASH_CHUNK_SIZE_DEFAULT)
HASH_CHUNK_SIZE: int = (
    _chunk_size
    if isinstance(_chunk_size, int) and _chunk_size > 0
    else HASH_CHUNK_SIZE_DEFAULT
)


# Worker pool -----------------------------------------------------------------

_jobs = getattr(app_config, "jobs", JOBS_DEFAULT)
DEFAULT_JOBS: int = _jobs if isinstance(_jobs, int) and _jobs > 0 else JOBS_DEFAULT

WORKER_THREAD_PREFIX: str = "copcon-hash"


# Presentation ----------------------------------------------------------------

SHOW_PROGRESS: bool = bool(getattr(app_config, "show_progress", True))


__all__ = [
    "DEFAULT_JOBS",
    "DIGEST_SIZE",
    "HASH_CHUNK_SIZE",
    "SHOW_PROGRESS",
    "WORKER_THREAD_PREFIX",
]
