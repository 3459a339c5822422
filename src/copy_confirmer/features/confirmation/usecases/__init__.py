"""Use cases orchestrating content-based copy confirmation."""

from .confirmer import CopyConfirmer, confirm
from .events import ConfirmationEvent
from .hasher import hash_file
from .job_pool import HashJobPool
from .matcher import match_result, match_source
from .ports import FileHasher, ProgressListener
from .reporter import build_report
from .tree_index import TreeIndex, build_tree_index
from .tree_walker import collect_jobs, walk_tree

__all__ = [
    "ConfirmationEvent",
    "CopyConfirmer",
    "FileHasher",
    "HashJobPool",
    "ProgressListener",
    "TreeIndex",
    "build_report",
    "build_tree_index",
    "collect_jobs",
    "confirm",
    "hash_file",
    "match_result",
    "match_source",
    "walk_tree",
]
