#!/usr/bin/env python3
'''
Dump the content of STEL files.

With -r the path can be a directory: all the files with extension .stel
found under it are dumped (.git directories are skipped).
'''
import os
import sys
import logging
from pathlib import Path

from stel import parse_file
from stel.exceptions import UnpackException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

EXTENSION = '.stel'


def usage(progname):
    print(f'usage: {progname} [-r] <stel file or directory>')
    sys.exit(1)


def find_stel_files(basepath):
    basepath = Path(basepath)
    if not basepath.is_dir():
        if basepath.suffix == EXTENSION:
            yield basepath.resolve()
        return

    for path in sorted(basepath.glob('**/*' + EXTENSION)):
        if '.git' in path.relative_to(basepath).parts:
            continue
        if not path.is_file():
            continue

        yield path.resolve()


def dump_file(path):
    try:
        container = parse_file(path)
    except (UnpackException, OSError) as e:
        logger.error(f'failed to parse file at path \'{path}\': {e}')
        return False
    except Exception:
        logger.error(f'failed to handle file at path \'{path}\'', exc_info=True)
        return False

    print(f'Data for {path}:')
    print(container)
    print()

    return True


if __name__ == '__main__':
    args = sys.argv[1:]
    recursive = '-r' in args
    args = [_ for _ in args if _ != '-r']

    if len(args) != 1:
        usage(sys.argv[0])

    paths = find_stel_files(args[0]) if recursive else [args[0]]

    failures = 0
    for path in paths:
        logger.debug(path)
        if not dump_file(path):
            failures += 1

    sys.exit(1 if failures else 0)
