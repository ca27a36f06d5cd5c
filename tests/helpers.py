"""Shared fixtures for dir-usage-cli tests."""
import os


def make_files(directory, files):
    """Create files under directory; files maps name -> size in bytes."""
    for name, size in files.items():
        path = os.path.join(directory, name)
        with open(path, "wb") as f:
            f.truncate(size)
    return directory


def make_dirs(directory, *names):
    paths = []
    for name in names:
        p = os.path.join(directory, name)
        os.makedirs(p)
        paths.append(p)
    return paths
