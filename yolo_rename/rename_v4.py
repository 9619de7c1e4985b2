"""
Flat-folder (YOLOv4 style) renaming.

Images and their same-stem .txt annotations live side by side. Pairs are
renamed eagerly, one at a time; an image without an annotation is skipped and
does not use up a number.
"""

import os
import sys
from typing import Tuple

from .errors import MoveFailed
from .exec_rename import move_file, same_path
from .plan_rename import LABEL_EXT, indexed_name, is_image_name, list_files
from .verify_images import find_unreadable_images


def rename_folder_v4(folder: str, dry_run: bool = False, check_images: bool = False) -> Tuple[int, int]:
    """
    Rename every image/annotation pair in `folder` to img_0001.<ext> / img_0001.txt.

    Returns (pairs moved, images skipped for want of an annotation).
    """
    img_count = 1
    renamed = 0
    skipped = 0
    claimed = set()
    prefix = '[DRY RUN] ' if dry_run else ''

    names = list_files(folder)
    if check_images:
        find_unreadable_images(os.path.join(folder, f) for f in names if is_image_name(f))

    for fname in names:
        if not is_image_name(fname):
            continue

        stem, ext = os.path.splitext(fname)
        img_path = os.path.join(folder, fname)
        txt_path = os.path.join(folder, stem + LABEL_EXT)

        # a.jpg + a.png: the first image in sort order takes a.txt
        if txt_path in claimed or not os.path.isfile(txt_path):
            print(f"Warning: no annotation for image {fname}, skipped", file=sys.stderr)
            skipped += 1
            continue
        claimed.add(txt_path)

        new_img_path = os.path.join(folder, indexed_name(img_count, ext))
        new_txt_path = os.path.join(folder, indexed_name(img_count, LABEL_EXT))

        img_count += 1
        pair = [(src, dst) for src, dst in ((img_path, new_img_path), (txt_path, new_txt_path))
                if not same_path(src, dst)]
        if not pair:
            continue

        if not dry_run:
            # both targets must be free before either file moves
            for src, dst in pair:
                if os.path.exists(dst):
                    raise MoveFailed(src, dst, "destination already exists")
            for src, dst in pair:
                move_file(src, dst)

        print(f"{prefix}Renamed: {fname} -> {os.path.basename(new_img_path)}, "
              f"{stem + LABEL_EXT} -> {os.path.basename(new_txt_path)}")
        renamed += 1

    print(f"Done. renamed={renamed}, skipped={skipped}, dir={folder}")
    return renamed, skipped
