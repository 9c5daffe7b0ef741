"""Integration tests for repository initialization."""

import pytest
from click.testing import CliRunner
from yo.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_init_creates_yo_directory(runner, temp_dir):
    """Test that init creates the .yo directory structure."""
    result = runner.invoke(cli, ['-C', str(temp_dir), 'init'])

    assert result.exit_code == 0
    assert "Initialized empty Yo repository successfully!" in result.output
    assert (temp_dir / '.yo' / 'objects').is_dir()
    assert (temp_dir / '.yo' / 'logs').is_dir()
    assert sorted(p.name for p in (temp_dir / '.yo').iterdir()) == ['logs', 'objects']


def test_double_init_fails(runner, temp_dir):
    """Test that initializing twice fails and reports why."""
    runner.invoke(cli, ['-C', str(temp_dir), 'init'])
    result = runner.invoke(cli, ['-C', str(temp_dir), 'init'])

    assert result.exit_code == 1
    assert "Error initializing repository" in result.output
    assert "already exists" in result.output


def test_init_in_current_directory(runner, temp_dir, monkeypatch):
    """Test the default root is the working directory."""
    monkeypatch.chdir(temp_dir)
    result = runner.invoke(cli, ['init'])
    assert result.exit_code == 0
    assert (temp_dir / '.yo').is_dir()


def test_unknown_command(runner, temp_dir):
    """Test unknown commands are reported as usage errors."""
    result = runner.invoke(cli, ['-C', str(temp_dir), 'frobnicate'])
    assert result.exit_code != 0
    assert "No such command" in result.output


def test_help_shows_commands(runner):
    """Test the help lists the command surface."""
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    for command in ('init', 'add', 'commit', 'log', 'status', 'cat-file'):
        assert command in result.output


def test_version(runner):
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output


def test_help_lists_presentation_flags(runner):
    result = runner.invoke(cli, ['--help'])
    assert '--interactive' in result.output
    assert '--no-color' in result.output


def test_environment_is_ignored(runner, temp_dir, monkeypatch):
    """Test presentation only follows command-line flags."""
    monkeypatch.setenv('YO_UI_INTERACTIVE', 'true')
    monkeypatch.setenv('YO_UI_COLOR', 'false')
    result = runner.invoke(cli, ['-C', str(temp_dir), 'init'], color=True)

    assert result.exit_code == 0
    assert "Press 'q' to quit." not in result.output
    assert '\x1b[' in result.output
