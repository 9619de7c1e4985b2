"""
Split-folder (YOLOv8 style) renaming.

Layout under the dataset root:

    <root>/train/images/*.jpg   <root>/train/labels/*.txt
    <root>/valid/...            <root>/test/...

Loose files in a split are sorted into images/ and labels/ first. Then, per
split, both plans are built before anything is renamed, so a duplicate target
stops the split with its files untouched.
"""

import os
from typing import List, Tuple

from .errors import DirectoryUnreadable
from .exec_rename import check_targets, execute_plan
from .plan_rename import plan_image_renames, plan_label_renames
from .split_layout import IMAGES_DIR, LABELS_DIR, classify_splits
from .verify_images import find_unreadable_images

RENAME_ORDER = ('test', 'train', 'valid')


def rename_split(split_dir: str, dry_run: bool = False, check_images: bool = False) -> Tuple[int, int]:
    """Plan and apply renames for one split. Returns (images moved, labels moved)."""
    img_dir = os.path.join(split_dir, IMAGES_DIR)
    lbl_dir = os.path.join(split_dir, LABELS_DIR)

    img_plan, txt_map = plan_image_renames(img_dir)
    lbl_plan = plan_label_renames(lbl_dir, txt_map)

    if check_images:
        find_unreadable_images(src for src, _ in img_plan)

    if not dry_run:
        # a blocked label target must not leave the images renamed
        check_targets(img_plan)
        check_targets(lbl_plan)

    n_img = execute_plan(img_plan, kind='Image', dry_run=dry_run)
    n_lbl = execute_plan(lbl_plan, kind='Label', dry_run=dry_run)
    print(f"Done. images={n_img}, labels={n_lbl}, split={split_dir}")
    return n_img, n_lbl


def rename_folder_v8(root: str, dry_run: bool = False, check_images: bool = False) -> List[str]:
    """Classify and rename every train/valid/test split under `root`. Returns the splits renamed."""
    try:
        os.listdir(root)
    except OSError as e:
        raise DirectoryUnreadable(root, e) from e

    classify_splits(root, dry_run=dry_run)

    done = []
    for name in RENAME_ORDER:
        split_dir = os.path.join(root, name)
        if not os.path.isdir(split_dir):
            continue
        if dry_run and not (os.path.isdir(os.path.join(split_dir, IMAGES_DIR))
                            and os.path.isdir(os.path.join(split_dir, LABELS_DIR))):
            print(f"[DRY RUN] {split_dir} has no {IMAGES_DIR}/ and {LABELS_DIR}/ yet, skipped")
            continue
        rename_split(split_dir, dry_run=dry_run, check_images=check_images)
        done.append(split_dir)
    return done
