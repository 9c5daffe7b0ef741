"""Repository initialization tests."""

import pytest
from pathlib import Path
from yo.core.repository import Repository, initialize, stage, commit, history
from yo.exceptions import AlreadyInitialized, IOFailure, NoStagedChanges, LogUnavailable

HELLO_DIGEST = 'aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d'


def test_repository_paths(temp_dir):
    """Test repository layout paths."""
    repo = Repository(temp_dir)
    assert repo.yo_dir == temp_dir / '.yo'
    assert repo.objects_dir == temp_dir / '.yo' / 'objects'
    assert repo.staging_file == temp_dir / '.yo' / 'staging'
    assert repo.log_file == temp_dir / '.yo' / 'logs' / 'commits'


def test_repository_init(temp_dir):
    """Test repository initialization creates structure."""
    repo = Repository(temp_dir).init()
    assert repo.objects_dir.is_dir()
    assert repo.logs_dir.is_dir()
    assert not repo.staging_file.exists()
    assert not repo.log_file.exists()


def test_repository_init_creates_only_objects_and_logs(temp_dir):
    """Test init leaves nothing but the two directories in .yo."""
    repo = Repository(temp_dir).init()
    assert sorted(p.name for p in repo.yo_dir.iterdir()) == ['logs', 'objects']


def test_repository_init_creates_missing_root(temp_dir):
    """Test init creates the root directory when needed."""
    repo = Repository(temp_dir / 'new' / 'project').init()
    assert repo.objects_dir.is_dir()


def test_repository_already_exists(repo):
    """Test duplicate init raises error."""
    with pytest.raises(AlreadyInitialized, match="already exists"):
        repo.init()


def test_reinit_leaves_structure_untouched(repo):
    """Test a failed init does not modify the existing repository."""
    digest = repo.objects.put(b'keep me')
    repo.log_file.write_text('existing log\n')

    with pytest.raises(AlreadyInitialized):
        Repository(repo.work_tree).init()

    assert repo.objects.get(digest) == b'keep me'
    assert repo.log_file.read_text() == 'existing log\n'


def test_init_under_a_file_fails(temp_dir):
    """Test init reports filesystem errors."""
    blocker = temp_dir / 'file'
    blocker.write_text('not a directory')
    with pytest.raises(IOFailure, match="failed to create .yo directory"):
        Repository(blocker).init()


def test_init_failure_removes_partial_structure(temp_dir, monkeypatch):
    """Test a half-created .yo is removed when init fails."""
    repo = Repository(temp_dir)
    real_mkdir = Path.mkdir

    def failing_mkdir(self, *args, **kwargs):
        if self == repo.logs_dir:
            raise PermissionError('denied')
        return real_mkdir(self, *args, **kwargs)

    monkeypatch.setattr(Path, 'mkdir', failing_mkdir)
    with pytest.raises(IOFailure, match='denied'):
        repo.init()
    assert not repo.yo_dir.exists()

    monkeypatch.undo()
    repo.init()
    assert repo.logs_dir.is_dir()


def test_read_object(repo):
    """Test reading an object back through the repository."""
    digest = repo.objects.put(b'test data')
    assert repo.object_exists(digest)
    assert repo.read_object(digest) == b'test data'


def test_function_api_end_to_end(temp_dir, clock):
    """Test the root-based functions work without changing directories."""
    initialize(temp_dir)
    (temp_dir / 'a.txt').write_bytes(b'hello')

    entry = stage(temp_dir, 'a.txt')
    assert entry.digest == HELLO_DIGEST

    record = commit(temp_dir, 'first', clock=clock())
    assert history(temp_dir).startswith(f"Commit: {record.digest}\n")

    with pytest.raises(NoStagedChanges):
        commit(temp_dir, 'again')


def test_history_before_first_commit(repo):
    """Test log is unavailable until something is committed."""
    with pytest.raises(LogUnavailable):
        repo.history()


def test_repr(repo):
    assert str(repo.work_tree) in repr(repo)
