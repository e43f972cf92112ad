from unittest import mock

import pytest
import schedule

import main
from process import scheduler


@pytest.fixture(autouse=True)
def clear_jobs():
    schedule.clear()
    yield
    schedule.clear()


def test_register_cleanup_schedule(monkeypatch, make_config):
    monkeypatch.setenv("SCHEDULE_TIME", "01:30, 13:00")

    jobs = scheduler.register_cleanup_schedule(config=make_config())

    assert len(jobs) == 2
    assert len(schedule.get_jobs()) == 2
    assert [str(job.at_time) for job in jobs] == ["01:30:00", "13:00:00"]


def test_run_cleanup_job_success(make_config):
    processor = mock.MagicMock()
    processor.return_value.execute.return_value.processed = 4
    with mock.patch.object(scheduler, "CleanupProcessor", processor):
        assert scheduler.run_cleanup_job(make_config()) == scheduler.CLEANUP_SUCCESS


def test_run_cleanup_job_failure_is_reported(make_config):
    processor = mock.MagicMock()
    processor.return_value.execute.side_effect = RuntimeError("down")
    with mock.patch.object(scheduler, "CleanupProcessor", processor):
        assert scheduler.run_cleanup_job(make_config()) == scheduler.CLEANUP_FAILED


def test_main_exit_status(monkeypatch, make_config):
    monkeypatch.setenv("RUN_MODE", "once")
    monkeypatch.setattr(main, "load_cleanup_config", lambda: make_config())
    processor = mock.MagicMock()
    monkeypatch.setattr(main, "CleanupProcessor", processor)

    assert main.main() == 0

    processor.return_value.execute.side_effect = RuntimeError("HTTP 500")
    assert main.main() == 1


def test_main_config_error_fails(monkeypatch):
    monkeypatch.setenv("RUN_MODE", "once")
    monkeypatch.delenv("BOLDDESK_DOMAIN", raising=False)
    monkeypatch.delenv("BOLDDESK_API_KEY", raising=False)

    assert main.main() == 1
