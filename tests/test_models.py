"""
Tests for generator models — defaults, derived paths, task names, containers.
"""

from pathlib import Path

import pytest

from wsdlgen.core.models import (
    Axis1Config,
    Axis2Config,
    BuildLayout,
    Databinding,
    NamedContainer,
    Provider,
    WsdlExtension,
    WsdlProperty,
    to_camel_case,
)

AXIS1_DEFAULTS = {
    "wsdl_file": "",
    "package_name": "",
    "generate_testcase": False,
    "namespace_package_mapping_file": "",
    "timeout": 240,
    "no_imports": False,
    "no_wrapped": False,
    "server_side": False,
    "skeleton_deploy": "",
    "deploy_scope": "",
    "generate_all_classes": False,
    "type_mapping_version": "1.2",
    "factory": "",
    "helper_gen": False,
    "user_name": "",
    "password": "",
    "implementation_class_name": "",
    "wrap_arrays": False,
    "allow_invalid_url": False,
    "ns_include": "",
    "ns_exclude": "",
}

AXIS2_DEFAULTS = {
    "wsdl_file": "",
    "package_name": "",
    "generate_testcase": False,
    "namespace_package_mapping_file": "",
    "async_only": False,
    "sync_only": False,
    "server_side": False,
    "service_description": False,
    "databinding_method": "adb",
    "generate_all_classes": False,
    "unpack_classes": False,
    "service_name": "",
    "port_name": "",
    "serverside_interface": False,
    "wsdl_version": "",
    "source_folder": "",
    "resource_folder": "",
    "flatten_files": False,
    "unwrap_params": False,
    "xsdconfig": False,
    "all_ports": False,
    "backward_compatible": False,
    "suppress_prefixes": False,
    "no_message_receiver": False,
}


class TestDefaults:
    """Every option reads as its documented default before assignment."""

    def test_axis1_defaults(self, layout):
        config = Axis1Config("svc", layout)
        for name, default in AXIS1_DEFAULTS.items():
            assert getattr(config, name) == default, name

    def test_axis2_defaults(self, layout):
        config = Axis2Config("svc", layout)
        for name, default in AXIS2_DEFAULTS.items():
            assert getattr(config, name) == default, name

    def test_option_sets_are_complete(self, layout):
        assert set(Axis1Config("a", layout).option_names()) == set(AXIS1_DEFAULTS) | {"output_dir"}
        assert set(Axis2Config("a", layout).option_names()) == set(AXIS2_DEFAULTS) | {"output_dir"}

    def test_collections_start_empty(self, layout):
        config = Axis1Config("svc", layout)
        assert config.args == []
        assert config.namespace_package_mapping == {}
        assert len(config.wsdl_properties) == 0

    def test_wsdl_properties_are_axis1_only(self, layout):
        config = Axis2Config("svc", layout)
        assert not hasattr(config, "wsdl_properties")
        assert "wsdl_properties" not in config.resolve()

    def test_databinding_default_is_adb(self):
        assert Axis2Config.databinding_method.default == Databinding.ADB.value

    def test_no_option_resolves_to_none(self, layout):
        for config in (Axis1Config("a", layout), Axis2Config("b", layout)):
            assert all(value is not None for value in config.resolve().values())


class TestOutputDir:
    def test_derived_from_name(self, layout, codegen_root):
        config = Axis1Config("My Service", layout)
        assert config.output_dir == codegen_root / "axis1" / "My_Service"
        assert config.output_dir.as_posix().endswith("/axis1/My_Service")

    def test_axis2_family_segment(self, layout, codegen_root):
        config = Axis2Config("My Service", layout)
        assert config.output_dir == codegen_root / "axis2" / "My_Service"

    def test_override_wins(self, layout):
        config = Axis1Config("My Service", layout)
        config.output_dir = "/custom/out"
        assert config.output_dir == Path("/custom/out")

    def test_follows_late_build_dir(self, tmp_path, layout):
        config = Axis2Config("svc", layout)
        layout.set_build_dir("target")
        assert config.output_dir == tmp_path / "target" / "generated" / "wsdl2java" / "axis2" / "svc"

    def test_override_is_permanent(self, layout):
        config = Axis2Config("svc", layout)
        config.output_dir = "/pinned"
        layout.set_build_dir("elsewhere")
        assert config.output_dir == Path("/pinned")

    def test_build_dir_provider(self, tmp_path):
        root = {"dir": tmp_path / "a"}
        layout = BuildLayout(tmp_path, Provider(lambda: root["dir"]))
        config = Axis1Config("svc", layout)
        root["dir"] = tmp_path / "b"
        assert config.output_dir == tmp_path / "b" / "generated" / "wsdl2java" / "axis1" / "svc"

    def test_output_dir_provider_view(self, layout):
        config = Axis1Config("svc", layout)
        view = config.provider("output_dir")
        config.output_dir = "/late"
        assert view.get() == Path("/late")


class TestTaskName:
    def test_axis1(self):
        assert Axis1Config("my service").task_name == "axis1Wsdl2javaMyService"

    def test_axis2(self):
        assert Axis2Config("my service").task_name == "axis2Wsdl2javaMyService"

    def test_only_first_letter_changes(self):
        assert to_camel_case("mY sERVICE") == "MYSERVICE"
        assert to_camel_case("orders") == "Orders"

    def test_single_space_split(self):
        assert to_camel_case("a  b") == "AB"


class TestWsdlProperties:
    def test_insertion_order(self, layout):
        config = Axis1Config("svc", layout)
        config.add_wsdl_property("b", "2")
        config.add_wsdl_property("a", "1")
        assert config.wsdl_properties.names() == ["b", "a"]
        assert config.resolve()["wsdl_properties"] == (("b", "2"), ("a", "1"))

    def test_names_are_unique(self, layout):
        config = Axis1Config("svc", layout)
        config.add_wsdl_property("a", "1")
        with pytest.raises(ValueError, match="Duplicate"):
            config.add_wsdl_property("a", "2")

    def test_maybe_create(self, layout):
        config = Axis1Config("svc", layout)
        prop = config.wsdl_properties.maybe_create("a")
        prop.value = "x"
        assert config.wsdl_properties.maybe_create("a") is prop
        assert isinstance(prop, WsdlProperty)


class TestNamedContainer:
    def test_create_sets_attributes(self):
        container = NamedContainer(lambda name: WsdlProperty(name=name))
        prop = container.create("key", value="v")
        assert container["key"] is prop
        assert prop.value == "v"
        assert "key" in container
        assert container.get("other") is None
        assert list(container) == [prop]


class TestWsdlExtension:
    def test_tasks_share_layout(self, layout, codegen_root):
        ext = WsdlExtension(layout)
        ext.add_axis1("Legacy", package_name="com.legacy")
        ext.add_axis2("Orders", async_only=True)
        assert ext.axis2["Orders"].output_dir == codegen_root / "axis2" / "Orders"
        assert ext.axis1["Legacy"].package_name == "com.legacy"

    def test_configs_order(self, layout):
        ext = WsdlExtension(layout)
        ext.add_axis2("B")
        ext.add_axis1("A")
        assert ext.task_names() == ["axis1Wsdl2javaA", "axis2Wsdl2javaB"]

    def test_find_task(self, layout):
        ext = WsdlExtension(layout)
        config = ext.add_axis2("order service")
        assert ext.find_task("axis2Wsdl2javaOrderService") is config
        assert ext.find_task("axis1Wsdl2javaOrderService") is None

    def test_duplicate_task_name(self, layout):
        ext = WsdlExtension(layout)
        ext.add_axis1("A")
        with pytest.raises(ValueError):
            ext.add_axis1("A")

    def test_unknown_option(self, layout):
        ext = WsdlExtension(layout)
        with pytest.raises(AttributeError):
            ext.add_axis1("A", databinding_method="adb")

    def test_colliding_task_names(self, layout):
        ext = WsdlExtension(layout)
        ext.add_axis1("my service")
        with pytest.raises(ValueError, match="axis1Wsdl2javaMyService"):
            ext.add_axis1("My service")
        assert ext.axis1.names() == ["my service"]

    def test_same_name_across_families(self, layout):
        ext = WsdlExtension(layout)
        ext.add_axis1("Orders")
        ext.add_axis2("Orders")
        assert ext.task_names() == ["axis1Wsdl2javaOrders", "axis2Wsdl2javaOrders"]

    def test_failed_add_registers_nothing(self, layout):
        ext = WsdlExtension(layout)
        with pytest.raises(AttributeError):
            ext.add_axis1("A", bogus=1)
        assert ext.axis1.names() == []

        config = ext.add_axis1("A", timeout=30)
        assert ext.axis1["A"] is config
        assert config.timeout == 30


class TestNamedContainerBuild:
    def test_build_does_not_register(self):
        container = NamedContainer(lambda name: WsdlProperty(name=name))
        prop = container.build("key")
        assert "key" not in container
        assert container.add("key", prop) is prop
        assert container.names() == ["key"]

    def test_add_rejects_duplicates(self):
        container = NamedContainer(lambda name: WsdlProperty(name=name))
        container.create("key")
        with pytest.raises(ValueError, match="Duplicate"):
            container.add("key", WsdlProperty(name="key"))
        with pytest.raises(ValueError, match="Duplicate"):
            container.build("key")
