"""
Tests for use cases — prepare, task listing and config check.
"""

from pathlib import Path

import pytest

from wsdlgen.core.use_cases.config_check import check_config
from wsdlgen.core.use_cases.prepare import prepare_task
from wsdlgen.core.use_cases.tasks import list_tasks

CONFIG = """\
    classpath:
      wsdlAxis2: [libs/axis2.jar]
    axis1:
      - name: legacy service
        wsdl_file: wsdl/legacy.wsdl
    axis2:
      - name: Orders
        wsdl_file: wsdl/orders.wsdl
        package_name: com.example.orders
        async_only: true
        sync_only: true
"""


@pytest.fixture
def config_path(write_config) -> Path:
    return write_config(CONFIG)


class TestPrepareTask:
    def test_axis2_invocation(self, tmp_path: Path, config_path: Path):
        result = prepare_task("axis2Wsdl2javaOrders", config_path)
        assert result.error is None
        assert result.family == "axis2"
        assert result.invocation is not None
        assert result.invocation.main_class == "org.apache.axis2.wsdl.WSDL2Java"
        assert result.invocation.classpath == (str(tmp_path / "libs" / "axis2.jar"),)
        assert "--async" in result.invocation.args
        assert "--sync" not in result.invocation.args

    def test_conflict_warning_collected(self, config_path: Path):
        result = prepare_task("axis2Wsdl2javaOrders", config_path)
        assert len(result.warnings) == 1
        assert "async" in result.warnings[0]

    def test_missing_classpath_warns(self, config_path: Path):
        result = prepare_task("axis1Wsdl2javaLegacyService", config_path)
        assert result.invocation is not None
        assert result.invocation.classpath == ()
        assert result.warnings == ["No classpath configured for 'wsdlAxis1'"]

    def test_unknown_task(self, config_path: Path):
        result = prepare_task("axis2Wsdl2javaMissing", config_path)
        assert result.invocation is None
        assert "Unknown task" in result.error
        assert "axis2Wsdl2javaOrders" in result.error

    def test_config_error(self, tmp_path: Path):
        result = prepare_task("anything", tmp_path / "missing.yml")
        assert "not found" in result.error
        assert result.to_dict() == {"task_name": "anything", "error": result.error}

    def test_to_dict(self, config_path: Path):
        data = prepare_task("axis2Wsdl2javaOrders", config_path).to_dict()
        assert data["family"] == "axis2"
        assert data["main_class"] == "org.apache.axis2.wsdl.WSDL2Java"
        assert data["args"][:2] == ["-uri", str(config_path.parent / "wsdl" / "orders.wsdl")]


class TestListTasks:
    def test_lists_in_order(self, tmp_path: Path, config_path: Path):
        result = list_tasks(config_path)
        assert [t.task_name for t in result.tasks] == [
            "axis1Wsdl2javaLegacyService",
            "axis2Wsdl2javaOrders",
        ]
        legacy = result.tasks[0]
        assert legacy.output_dir == str(
            tmp_path / "build" / "generated" / "wsdl2java" / "axis1" / "legacy_service"
        )
        assert result.to_dict()["total"] == 2

    def test_error(self, tmp_path: Path):
        result = list_tasks(tmp_path / "missing.yml")
        assert result.tasks == []
        assert "error" in result.to_dict()


class TestCheckConfig:
    def test_valid_with_warnings(self, tmp_path: Path, config_path: Path):
        (tmp_path / "wsdl").mkdir()
        (tmp_path / "wsdl" / "orders.wsdl").write_text("<definitions/>")
        result = check_config(config_path)
        assert result.valid
        # legacy.wsdl is missing, legacy has no package
        assert any("does not exist" in w for w in result.warnings)
        assert any("no package_name" in w for w in result.warnings)
        assert not any("Orders" in w for w in result.warnings)

    def test_no_tasks(self, write_config):
        result = check_config(write_config("build_dir: build\n"))
        assert result.valid
        assert any("No generator tasks" in w for w in result.warnings)

    def test_invalid(self, write_config):
        result = check_config(write_config("axis1:\n  - name: A\n    bogus: 1\n"))
        assert not result.valid
        assert result.to_dict()["valid"] is False

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        result = check_config()
        assert not result.valid
        assert result.errors == ["No wsdl.yml found."]
