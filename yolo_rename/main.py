import argparse
import sys

from .errors import RenameError
from .rename_v4 import rename_folder_v4
from .rename_v8 import rename_folder_v8

MODE_TOKENS = {'v4': 'v4', '--v4': 'v4', 'v8': 'v8', '--v8': 'v8'}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='yolo-rename',
        description='Rename YOLO image/label pairs to img_0001.<ext> / img_0001.txt',
    )
    parser.add_argument('folders', nargs='*',
                        help='dataset folders, optionally followed by the mode (v4 or v8)')
    parser.add_argument('--v4', dest='mode', action='store_const', const='v4',
                        help='flat folder of images and .txt labels (default)')
    parser.add_argument('--v8', dest='mode', action='store_const', const='v8',
                        help='root with train/valid/test splits holding images/ and labels/')
    parser.add_argument('--dry_run', action='store_true',
                        help='print what would be renamed without touching any file')
    parser.add_argument('--check_images', action='store_true',
                        help='warn about images OpenCV cannot decode before renaming')
    return parser


def split_mode_token(folders, default='v4'):
    """Pull a trailing v4/v8 token off the folder list; anything else is a folder."""
    if folders and folders[-1] in MODE_TOKENS:
        return folders[:-1], MODE_TOKENS[folders[-1]]
    return list(folders), default


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    folders, mode = split_mode_token(args.folders, default=args.mode or 'v4')
    if not folders:
        parser.print_usage(sys.stderr)
        print("Error: no folder provided. Provide at least one folder path before the optional mode.",
              file=sys.stderr)
        print('Example: yolo-rename "datasets/set1" v8', file=sys.stderr)
        return 2

    print(f"Mode: {'YOLOv4' if mode == 'v4' else 'YOLOv8'}")
    failed = 0
    for folder in folders:
        print(f"Processing folder: {folder}")
        try:
            if mode == 'v4':
                rename_folder_v4(folder, dry_run=args.dry_run, check_images=args.check_images)
            else:
                rename_folder_v8(folder, dry_run=args.dry_run, check_images=args.check_images)
        except (RenameError, OSError) as e:
            print(f"Error processing folder {folder}: {e}", file=sys.stderr)
            failed += 1

    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
