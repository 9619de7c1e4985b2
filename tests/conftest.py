import os

import pytest


def _touch(folder, *names):
    """Create files whose content is their own original name."""
    os.makedirs(folder, exist_ok=True)
    for name in names:
        with open(os.path.join(folder, name), 'w', encoding='utf-8') as f:
            f.write(name)


def _read(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


@pytest.fixture
def make_files():
    return _touch


@pytest.fixture
def read_file():
    return _read
