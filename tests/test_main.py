import os

from yolo_rename.main import main, split_mode_token


def test_trailing_mode_token():
    assert split_mode_token(['a', 'b', 'v8']) == (['a', 'b'], 'v8')
    assert split_mode_token(['a', '--v4']) == (['a'], 'v4')
    assert split_mode_token(['a', 'b']) == (['a', 'b'], 'v4')
    assert split_mode_token(['a', 'v9']) == (['a', 'v9'], 'v4')


def test_no_folder_prints_usage(capsys):
    assert main([]) == 2
    captured = capsys.readouterr()
    assert 'usage:' in captured.err
    assert captured.out == ''


def test_mode_token_alone_is_not_a_folder(capsys):
    assert main(['v8']) == 2
    assert 'no folder provided' in capsys.readouterr().err


def test_v4_is_default(tmp_path, make_files, capsys):
    d = str(tmp_path)
    make_files(d, 'b.png', 'b.txt', 'a.jpg', 'a.txt')

    assert main([d]) == 0
    assert sorted(os.listdir(d)) == ['img_0001.jpg', 'img_0001.txt', 'img_0002.png', 'img_0002.txt']
    out = capsys.readouterr().out
    assert 'Mode: YOLOv4' in out
    assert f'Processing folder: {d}' in out


def test_v8_flag(tmp_path, make_files, capsys):
    root = str(tmp_path)
    make_files(os.path.join(root, 'train'), 'x.jpg', 'x.txt')

    assert main(['--v8', root]) == 0
    assert os.listdir(os.path.join(root, 'train', 'images')) == ['img_0001.jpg']
    assert 'Mode: YOLOv8' in capsys.readouterr().out


def test_bad_folder_does_not_stop_the_others(tmp_path, make_files, capsys):
    good = str(tmp_path / 'good')
    make_files(os.path.join(good, 'test'), 'x.jpg', 'x.txt')
    missing = str(tmp_path / 'missing')

    assert main([missing, good, 'v8']) == 1
    assert os.listdir(os.path.join(good, 'test', 'labels')) == ['img_0001.txt']
    assert f'Error processing folder {missing}' in capsys.readouterr().err


def test_v4_failure_is_isolated_per_folder(tmp_path, make_files, capsys):
    missing = str(tmp_path / 'missing')
    good = str(tmp_path / 'good')
    make_files(good, 'a.jpg', 'a.txt')

    assert main([missing, good, 'v4']) == 1
    assert sorted(os.listdir(good)) == ['img_0001.jpg', 'img_0001.txt']
    assert f'Error processing folder {missing}' in capsys.readouterr().err
