import os
from pathlib import Path

import pytest

from hostfs.core.common.errors import (
    ChangeDirNotADirectoryError,
    ChangeDirNotFoundError,
    NotFoundError,
    ValidationError,
)
from hostfs.core.execution.context import ExecutionContext
from hostfs.core.execution.runner import QueryRunner
from hostfs.features.change_dir.data.working_directory import (
    ProcessWorkingDirectory,
    SessionWorkingDirectory,
)
from hostfs.features.change_dir.service.api import cd, change_directory, print_working_directory
from hostfs.features.listing.service.api import list_directory, ls


class CountingWorkingDirectory(SessionWorkingDirectory):
    """Session directory that records every change request."""

    def __init__(self, start):
        super().__init__(start)
        self.changes = []

    def change(self, target):
        self.changes.append(target)
        return super().change(target)

@pytest.fixture
def counting_context(tmp_path):
    return ExecutionContext(CountingWorkingDirectory(tmp_path))


def test_repeated_produce_changes_directory_once(counting_context, sample_tree):
    bound = cd.bind(counting_context, str(sample_tree / "sub"))
    state = cd.init(counting_context, bound)

    # Host look-ahead: produce is probed a second time
    first = cd.produce(bound, state, 2048)
    second = cd.produce(bound, state, 2048)

    assert len(first) + len(second) == 1
    assert first == [(os.path.realpath(sample_tree / "sub"), True)]
    assert len(counting_context.working_directory.changes) == 1
    assert counting_context.cwd == Path(os.path.realpath(sample_tree / "sub"))

def test_missing_target_fails_without_effect(counting_context, tmp_path):
    before = counting_context.cwd
    bound = cd.bind(counting_context, str(tmp_path / "missing"))
    state = cd.init(counting_context, bound)

    with pytest.raises(NotFoundError) as exc:
        cd.produce(bound, state, 2048)

    assert isinstance(exc.value, ChangeDirNotFoundError)
    # The failed execution is exhausted: no row, no retry
    assert cd.produce(bound, state, 2048) == []
    assert counting_context.working_directory.changes == []
    assert counting_context.cwd == before

def test_file_target_is_not_a_directory(context, sample_tree):
    with pytest.raises(ChangeDirNotADirectoryError):
        change_directory(str(sample_tree / "a.txt"), context=context)

def test_relative_target_resolves_against_context(context, tmp_path, sample_tree):
    result = change_directory("root", context=context)

    assert result.column_names == ["current_directory", "success"]
    assert result.rows == [(os.path.realpath(sample_tree), True)]
    assert print_working_directory(context) == os.path.realpath(sample_tree)

def test_later_listings_use_the_new_directory(context, sample_tree):
    runner = QueryRunner(context)
    runner.execute(cd, "root")
    runner.execute(cd, "sub")

    rows = runner.execute(ls).rows

    assert [row[0] for row in rows] == [os.path.join(".", "b.txt")]

def test_facades_without_context_share_the_directory(monkeypatch, tmp_path, sample_tree):
    monkeypatch.chdir(tmp_path)

    result = change_directory(str(sample_tree))
    listing = list_directory()

    assert result.rows == [(os.path.realpath(sample_tree), True)]
    assert print_working_directory() == os.path.realpath(sample_tree)
    assert {os.path.basename(row[0]) for row in listing.rows} == {"a.txt", "sub", "locked"}
    # Session mode: only the shared context moved
    assert os.getcwd() == os.path.realpath(tmp_path)

def test_parent_of_symlink_follows_the_link_target(context, tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "link").symlink_to(tmp_path / "a" / "b", target_is_directory=True)

    result = change_directory("link/..", context=context)

    assert result.rows == [(os.path.realpath(tmp_path / "a"), True)]
    assert context.cwd == Path(os.path.realpath(tmp_path / "a"))

def test_process_mode_parent_of_symlink_matches_os(monkeypatch, tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "link").symlink_to(tmp_path / "a" / "b", target_is_directory=True)
    monkeypatch.chdir(tmp_path)
    context = ExecutionContext(ProcessWorkingDirectory())

    change_directory("link/..", context=context)

    assert os.getcwd() == os.path.realpath(tmp_path / "a")

def test_session_mode_leaves_process_cwd_alone(context, sample_tree):
    process_cwd = os.getcwd()
    change_directory(str(sample_tree), context=context)
    assert os.getcwd() == process_cwd

def test_process_mode_moves_process_cwd(monkeypatch, tmp_path, sample_tree):
    # Restores the real cwd after the test
    monkeypatch.chdir(tmp_path)
    context = ExecutionContext(ProcessWorkingDirectory())

    result = change_directory("root", context=context)

    assert os.getcwd() == os.path.realpath(sample_tree)
    assert result.rows == [(os.path.realpath(sample_tree), True)]

def test_executions_do_not_share_state(context, sample_tree):
    bound = cd.bind(context, str(sample_tree))
    first = cd.init(context, bound)
    second = cd.init(context, bound)

    assert len(cd.produce(bound, first, 2048)) == 1
    assert len(cd.produce(bound, second, 2048)) == 1

@pytest.mark.parametrize("args, kwargs", [
    ((), {}),
    (("/tmp", "/var"), {}),
    ((), {"path": "/tmp"}),
    ((42,), {}),
    (("",), {}),
])
def test_bind_requires_exactly_one_path(context, args, kwargs):
    with pytest.raises(ValidationError):
        cd.bind(context, *args, **kwargs)
