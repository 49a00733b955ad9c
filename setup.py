"""
Build script for xstring. Project metadata lives in pyproject.toml; this script
keeps git-ignored files out of the build and adds a `clean` command.
"""

# std
import os
import glob
import fnmatch
from pathlib import Path
from collections import abc

# third-party
from setuptools.command.build_py import build_py
from setuptools import Command, setup


# Git ignore
# ---------------------------------------------------------------------------- #

IGNORE_IMPLICIT = ('.git', )


def read(path):
    # read glob patterns from file, skipping comments and blank lines
    path = Path(path)
    if not path.exists():
        return []

    return list(filter(None, (line.strip(' ')
                              for line in path.read_text().splitlines()
                              if not line.startswith('#'))))


class GitIgnore:
    """
    Filter files matching any of the glob patterns in a `.gitignore` file.
    """

    def __init__(self, filename='.gitignore'):
        path = Path(filename)
        self.root = path.parent
        self.names = list(IGNORE_IMPLICIT)
        self.patterns = []
        self.add(read(path))

    def add(self, items):
        if isinstance(items, str):
            items = [items]

        if not isinstance(items, abc.Iterable):
            raise TypeError(f'Invalid object type {type(items).__name__}: {items}.')

        for pattern in filter(None, items):
            (self.names, self.patterns)[glob.has_magic(pattern)].append(
                pattern.rstrip('/'))

    def match(self, filename):
        filename = str(filename)
        for pattern in self.patterns:
            if fnmatch.fnmatchcase(filename, pattern):
                return True

        return filename.endswith(tuple(self.names))


# Setuptools
# ---------------------------------------------------------------------------- #

class Builder(build_py):
    # need this to exclude ignored files from the build archive

    def find_package_modules(self, package, package_dir):
        # filter folders
        if gitignore.match(package_dir) or gitignore.match(Path(package_dir).name):
            return []

        # package, module, files
        return [(package, module, path)
                for package, module, path in
                super().find_package_modules(package, package_dir)
                if not gitignore.match(path)]


class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #
gitignore = GitIgnore()

setup(
    include_package_data=True,
    cmdclass={'build_py': Builder,
              'clean': CleanCommand}
)
