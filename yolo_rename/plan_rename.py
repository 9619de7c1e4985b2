"""
Rename planning for paired image / annotation folders.

Nothing in this module touches the filesystem beyond listing a directory.
The image pass decides the numbering; the label pass only looks names up in
the map the image pass produced.
"""

import os
import sys
from typing import Dict, List, Tuple

from .errors import DirectoryUnreadable, DuplicateTarget

IMAGE_EXTS = ('.jpg', '.jpeg', '.png')
LABEL_EXT = '.txt'
NAME_PREFIX = 'img_'
INDEX_WIDTH = 4

# (source path, destination path) pairs, applied in order
RenamePlan = List[Tuple[str, str]]
# old annotation filename -> new annotation filename
LabelNameMap = Dict[str, str]


def is_image_name(fname: str) -> bool:
    return os.path.splitext(fname)[1].lower() in IMAGE_EXTS


def is_label_name(fname: str) -> bool:
    return os.path.splitext(fname)[1] == LABEL_EXT


def indexed_name(index: int, ext: str) -> str:
    """img_0001.jpg style name; the number widens past 9999 instead of wrapping."""
    return f"{NAME_PREFIX}{index:0{INDEX_WIDTH}d}{ext}"


def list_files(folder: str) -> List[str]:
    """Plain files directly inside `folder`, sorted by raw filename."""
    try:
        names = os.listdir(folder)
    except OSError as e:
        raise DirectoryUnreadable(folder, e) from e
    return sorted(n for n in names if os.path.isfile(os.path.join(folder, n)))


def plan_image_renames(folder: str) -> Tuple[RenamePlan, LabelNameMap]:
    """
    Number the images of `folder` in filename order.

    Returns the image plan and the map from each image's expected annotation
    name (same stem, .txt) to its new annotation name.
    """
    images = [f for f in list_files(folder) if is_image_name(f)]

    image_plan: RenamePlan = []
    txt_name_map: LabelNameMap = {}
    targets = set()

    for idx, fname in enumerate(images, start=1):
        stem, ext = os.path.splitext(fname)
        new_path = os.path.join(folder, indexed_name(idx, ext))

        if new_path in targets:
            raise DuplicateTarget('image', new_path)
        targets.add(new_path)

        image_plan.append((os.path.join(folder, fname), new_path))
        txt_key = stem + LABEL_EXT
        if txt_key in txt_name_map:
            # a.jpg + a.png: the first image in sort order keeps a.txt
            print(f"Warning: images sharing stem {stem!r}, {fname} gets no annotation",
                  file=sys.stderr)
            continue
        txt_name_map[txt_key] = indexed_name(idx, LABEL_EXT)

    return image_plan, txt_name_map


def plan_label_renames(folder: str, name_map: LabelNameMap) -> RenamePlan:
    """
    Plan annotation renames in `folder` by looking each name up in `name_map`.

    Annotations without an entry are reported on stderr and left out of the plan.
    """
    labels = [f for f in list_files(folder) if is_label_name(f)]

    plan: RenamePlan = []
    targets = set()

    for fname in labels:
        new_name = name_map.get(fname)
        if new_name is None:
            print(f"Warning: no mapping for label {fname}", file=sys.stderr)
            continue
        new_path = os.path.join(folder, new_name)
        if new_path in targets:
            raise DuplicateTarget('label', new_path)
        targets.add(new_path)
        plan.append((os.path.join(folder, fname), new_path))

    return plan
