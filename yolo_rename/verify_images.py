import sys
from typing import Iterable, List

import cv2


def find_unreadable_images(paths: Iterable[str]) -> List[str]:
    """Return the images OpenCV cannot decode, warning about each one on stderr."""
    bad: List[str] = []
    for path in paths:
        img = cv2.imread(path)
        if img is None:
            print(f"Warning: cannot decode image {path}", file=sys.stderr)
            bad.append(path)
    return bad
