import os
from typing import List

from .exec_rename import move_file
from .plan_rename import is_image_name, list_files

SPLITS = ('train', 'valid', 'test')
IMAGES_DIR = 'images'
LABELS_DIR = 'labels'


def classify_split(split_dir: str, dry_run: bool = False) -> int:
    """
    Move loose files of a split folder into its images/ and labels/ subfolders.

    Only files directly inside `split_dir` are looked at. Images go to
    images/, .txt (any case) to labels/, anything else stays where it is.
    Returns the number of files moved.
    """
    imgs = os.path.join(split_dir, IMAGES_DIR)
    lbls = os.path.join(split_dir, LABELS_DIR)

    if not dry_run:
        os.makedirs(imgs, exist_ok=True)
        os.makedirs(lbls, exist_ok=True)

    prefix = '[DRY RUN] ' if dry_run else ''
    moved = 0
    for fname in list_files(split_dir):
        if is_image_name(fname):
            target_dir, what = imgs, 'image'
        elif os.path.splitext(fname)[1].lower() == '.txt':
            target_dir, what = lbls, 'label'
        else:
            continue

        if not dry_run:
            move_file(os.path.join(split_dir, fname), os.path.join(target_dir, fname))
        print(f"{prefix}Moved {what} {fname}")
        moved += 1

    return moved


def classify_splits(root: str, dry_run: bool = False) -> List[str]:
    """Run classify_split on each of train/valid/test that exists under `root`."""
    done = []
    for name in SPLITS:
        split_dir = os.path.join(root, name)
        if not os.path.isdir(split_dir):
            continue
        classify_split(split_dir, dry_run=dry_run)
        done.append(split_dir)
    return done
