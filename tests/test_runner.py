"""Tests for the Runner orchestration."""

import logging

import yaml
from junitparser import JUnitXml

from xctest.config import RunConfig
from xctest.runner import Runner


def _config(sample_module: str, *targets: str) -> RunConfig:
    return RunConfig(name="root", suites=[f"{sample_module}:{t}" for t in targets])


def test_execute_creates_run_dir_with_artifacts(tmp_path, sample_module):
    runner = Runner(_config(sample_module, "make_passing"), output_dir=tmp_path / "runs")
    run_dir = runner.execute()

    assert run_dir.parent == tmp_path / "runs"
    assert (run_dir / "junit.xml").exists()
    assert (run_dir / "meta.yaml").exists()
    assert (run_dir / "debug.log").exists()


def test_execute_records_result(tmp_path, sample_module):
    runner = Runner(_config(sample_module, "make_passing", "make_failing"), output_dir=tmp_path)
    runner.execute()

    result = runner.result
    assert result is not None
    assert result.execution_count == 4
    assert result.failure_count == 1
    assert result.unexpected_exception_count == 1
    assert not result.has_succeeded


def test_meta_yaml_contents(tmp_path, sample_module):
    runner = Runner(_config(sample_module, "make_failing"), output_dir=tmp_path)
    run_dir = runner.execute()

    meta = yaml.safe_load((run_dir / "meta.yaml").read_text())
    assert meta["run_id"] == run_dir.name
    assert meta["suite"] == "root"
    assert meta["test_case_count"] == 2
    assert meta["execution_count"] == 2
    assert meta["failure_count"] == 1
    assert meta["unexpected_exception_count"] == 1
    assert "xctest_version" in meta


def test_junit_written_for_run(tmp_path, sample_module):
    runner = Runner(_config(sample_module, "make_failing"), output_dir=tmp_path)
    run_dir = runner.execute()

    xml = JUnitXml.fromfile(str(run_dir / "junit.xml"))
    suites = list(xml)
    assert [s.name for s in suites] == ["root / failing"]
    assert suites[0].failures == 1
    assert suites[0].errors == 1


def test_debug_log_captures_lifecycle(tmp_path, sample_module):
    runner = Runner(_config(sample_module, "make_failing"), output_dir=tmp_path)
    run_dir = runner.execute()

    content = (run_dir / "debug.log").read_text()
    assert "Starting test run" in content
    assert "Test suite 'failing' started" in content
    assert "XCTAssertEqual failed" in content


def test_logger_released_after_execute(tmp_path, sample_module):
    Runner(_config(sample_module, "make_passing"), output_dir=tmp_path / "a").execute()
    assert logging.getLogger("xctest").handlers == []

    # a second run in the same process can configure the logger again
    Runner(_config(sample_module, "make_passing"), output_dir=tmp_path / "b").execute()


def test_output_dir_defaults_to_config(tmp_path, sample_module):
    config = RunConfig(output_dir=str(tmp_path / "from-config"), suites=[f"{sample_module}:make_passing"])
    run_dir = Runner(config).execute()
    assert run_dir.parent == tmp_path / "from-config"
