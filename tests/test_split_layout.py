import os

from yolo_rename.split_layout import classify_split, classify_splits


def test_loose_files_are_sorted_into_subfolders(tmp_path, make_files):
    split = str(tmp_path / 'train')
    make_files(split, 'x.jpg', 'y.PNG', 'x.txt', 'y.TXT', 'data.yaml')

    assert classify_split(split) == 4
    assert sorted(os.listdir(os.path.join(split, 'images'))) == ['x.jpg', 'y.PNG']
    assert sorted(os.listdir(os.path.join(split, 'labels'))) == ['x.txt', 'y.TXT']
    assert sorted(os.listdir(split)) == ['data.yaml', 'images', 'labels']


def test_already_split_folder_is_left_alone(tmp_path, make_files):
    split = str(tmp_path / 'valid')
    make_files(os.path.join(split, 'images'), 'a.jpg')
    make_files(os.path.join(split, 'labels'), 'a.txt')

    assert classify_split(split) == 0
    assert os.listdir(os.path.join(split, 'images')) == ['a.jpg']
    assert os.listdir(os.path.join(split, 'labels')) == ['a.txt']


def test_only_known_splits_are_visited(tmp_path, make_files):
    make_files(str(tmp_path / 'train'), 'a.jpg')
    make_files(str(tmp_path / 'extra'), 'b.jpg')

    done = classify_splits(str(tmp_path))
    assert done == [str(tmp_path / 'train')]
    assert os.listdir(str(tmp_path / 'extra')) == ['b.jpg']


def test_dry_run_creates_nothing(tmp_path, make_files, capsys):
    split = str(tmp_path / 'test')
    make_files(split, 'a.jpg', 'a.txt')

    assert classify_split(split, dry_run=True) == 2
    assert sorted(os.listdir(split)) == ['a.jpg', 'a.txt']
    out = capsys.readouterr().out
    assert '[DRY RUN] Moved image a.jpg' in out
    assert '[DRY RUN] Moved label a.txt' in out
