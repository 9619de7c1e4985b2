"""
Rename paired YOLO image/annotation files to a sequential img_0001 scheme.
"""

from .errors import RenameError, DirectoryUnreadable, DuplicateTarget, MoveFailed
from .plan_rename import plan_image_renames, plan_label_renames
from .exec_rename import execute_plan
from .split_layout import classify_split, classify_splits
from .rename_v4 import rename_folder_v4
from .rename_v8 import rename_folder_v8

__all__ = [
    "RenameError",
    "DirectoryUnreadable",
    "DuplicateTarget",
    "MoveFailed",
    "plan_image_renames",
    "plan_label_renames",
    "execute_plan",
    "classify_split",
    "classify_splits",
    "rename_folder_v4",
    "rename_folder_v8",
]
