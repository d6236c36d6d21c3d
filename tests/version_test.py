"""Test the management of `awxml.__version__`."""
import importlib
import importlib.util
import os.path
import unittest.mock as mock

import git
import packaging.version
import pytest

import awxml


def test_awxml_has_pep440_version():
    """Check that `awxml.__version__` complies to PEP440."""
    version = awxml.__version__
    if version is None:
        pytest.skip('`awxml/_version.py` not generated by `setup.py`')
    version_module = importlib.import_module('awxml._version')
    version_ = version_module.version
    assert version == version_, (version, version_)
    assert_pep440(version)


@mock.patch('git.Repo')
def test_git_version(mock_repo):
    """Mock `git` repository for testing `setup.git_version`."""
    path = os.path.realpath(__file__)
    path = os.path.dirname(path)
    path = os.path.dirname(path)  # parent dir
    path = os.path.join(path, 'setup.py')
    spec = importlib.util.spec_from_file_location('setup', path)
    setup = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(setup)
    # mocking
    version = '0.1.2'
    instance = mock_repo.return_value
    instance.head.commit.hexsha = '0123'
    # dirty repo
    v = setup.git_version(version)
    assert_pep440(v)
    assert 'dev' in v, v
    assert 'dirty' in v, v
    # not dirty, not tagged
    instance.is_dirty.return_value = False
    instance.git.describe.side_effect = git.GitCommandError('0', 0)
    v = setup.git_version(version)
    assert_pep440(v)
    assert 'dev' in v, v
    assert 'dirty' not in v, v
    # tagged as version that matches `setup.py`
    instance.git.describe.side_effect = None
    instance.git.describe.return_value = 'v0.1.2'
    v = setup.git_version(version)
    assert_pep440(v)
    assert v == '0.1.2', v
    # tagged as wrong version
    instance.git.describe.return_value = 'v0.1.3'
    with pytest.raises(AssertionError):
        setup.git_version(version)
    # release: no repo
    mock_repo.side_effect = Exception('no repo found')
    with pytest.raises(Exception):
        setup.git_version(version)


def assert_pep440(version):
    """Raise `InvalidVersion` if `version` violates PEP440."""
    packaging.version.Version(version)
