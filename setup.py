#!/usr/bin/env python
"""Installation script."""
import logging
import traceback as _tb

import setuptools
# inline:
# import git
# import awxml.guard.lexyacc


NAME = 'awxml'
VERSION_FILE = f'{NAME}/_version.py'
MAJOR = 0
MINOR = 1
MICRO = 0
VERSION = f'{MAJOR}.{MINOR}.{MICRO}'
VERSION_TEXT = (
    '# This file was generated from setup.py\n'
    "version = '{version}'\n")
DESCRIPTION = (
    'Register automata in the AutomataWiki XML format')
INSTALL_REQUIRES = [
    'ply >= 3.11']
EXTRAS_REQUIRE = {
    'test': [
        'GitPython',
        'packaging',
        'pytest >= 7.0']}
logging.basicConfig(level=logging.WARNING)
_logger = logging.getLogger(__name__)


def git_version(
        version:
            str
        ) -> str:
    """Return version with local version identifier."""
    import git
    repo = git.Repo('.git')
    repo.git.status()
    sha = repo.head.commit.hexsha
    if repo.is_dirty():
        return f'{version}.dev0+{sha}.dirty'
    # commit is clean
    # is it release of `version` ?
    try:
        tag = repo.git.describe(
            match='v[0-9]*',
            exact_match=True,
            tags=True,
            dirty=True)
    except git.GitCommandError:
        return f'{version}.dev0+{sha}'
    assert tag == 'v' + version, (tag, version)
    return version


def run_setup() -> None:
    """Build parser, get version from `git`, install."""
    # Build PLY table, to be installed as awxml package data
    try:
        import awxml.guard.lexyacc
        tabmodule = awxml.guard.lexyacc.TABMODULE.split('.')[-1]
        outputdir = 'awxml/guard'
        parser = awxml.guard.lexyacc.Parser()
        parser.build(
            tabmodule,
            outputdir=outputdir,
            write_tables=True,
            debug=True,
            debuglog=_logger)
        plytable_build_failed = False
    except Exception as e:
        tb = ''.join(
            _tb.format_exception(e))
        print(
            f'Failed to build PLY tables, raising:\n{tb}')
        plytable_build_failed = True
    # version
    try:
        version = git_version(VERSION)
    except AssertionError:
        raise
    except Exception:
        print('No git info: Assume release.')
        version = VERSION
    s = VERSION_TEXT.format(version=version)
    with open(VERSION_FILE, 'w') as f:
        f.write(s)
    # setup
    setuptools.setup(
        name=NAME,
        version=version,
        description=DESCRIPTION,
        python_requires='>=3.10',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        packages=[
            NAME,
            f'{NAME}.guard'],
        package_dir={
            NAME: NAME})
    # ply failed ?
    if plytable_build_failed:
        print('!' * 65 +
              '    Failed to build PLY table.  ' +
              'Please run setup.py again.' +
              '!' * 65)


if __name__ == '__main__':
    run_setup()
