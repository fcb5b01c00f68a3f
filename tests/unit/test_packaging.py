"""
Tests for the declared distribution metadata.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip('tomllib')

PYPROJECT = Path(__file__).resolve().parents[2] / 'pyproject.toml'


def _project():
    with PYPROJECT.open('rb') as fh:
        return tomllib.load(fh)['project']


def test_gunicorn_is_a_deploy_extra():
    project = _project()

    assert not any(dep.startswith('gunicorn') for dep in project['dependencies'])
    assert any(dep.startswith('gunicorn') for dep in project['optional-dependencies']['deploy'])


def test_runtime_dependencies_cover_the_app_stack():
    names = {dep.split('>')[0].split('[')[0] for dep in _project()['dependencies']}
    assert names == {'Flask', 'python-dotenv', 'prometheus-client', 'sentry-sdk'}
