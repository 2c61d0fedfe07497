"""Tests for the devices and their outlet adapters.

Tests cover:
    - Device status strings
    - Adapters forwarding plug_in() unchanged
    - Adapter ownership of the wrapped device
    - Constructor annotations binding each adapter to its device type
    - Repeated plug_in() calls returning identical results
"""

from typing import Any, get_type_hints

import pytest

from powerstrip.adapters import LaptopAdapter, RefrigeratorAdapter, SmartphoneAdapter
from powerstrip.devices import Laptop, Refrigerator, SmartphoneCharger
from powerstrip.outlet import Outlet


class TestDevices:
    """Tests for the device types."""

    def test_laptop_charges(self) -> None:
        assert Laptop().charge() == "Laptop is charging."

    def test_refrigerator_starts_cooling(self) -> None:
        assert Refrigerator().start_cooling() == "Refrigerator is cooling."

    def test_smartphone_charger_charges_phone(self) -> None:
        assert SmartphoneCharger().charge_phone() == "Smartphone is charging."

    def test_devices_do_not_implement_outlet(self) -> None:
        """Verify devices need an adapter to be used as an outlet."""
        for device in (Laptop(), Refrigerator(), SmartphoneCharger()):
            assert not isinstance(device, Outlet)
            assert not hasattr(device, "plug_in")


class TestOutlet:
    """Tests for the Outlet interface."""

    def test_outlet_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            Outlet()  # type: ignore[abstract]

    def test_subclass_without_plug_in_cannot_be_instantiated(self) -> None:
        class Incomplete(Outlet):
            pass

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]


PAIRS = [
    pytest.param(LaptopAdapter, Laptop, "charge", id="laptop"),
    pytest.param(RefrigeratorAdapter, Refrigerator, "start_cooling", id="refrigerator"),
    pytest.param(SmartphoneAdapter, SmartphoneCharger, "charge_phone", id="smartphone"),
]


class TestAdapters:
    """Tests for the outlet adapters."""

    @pytest.mark.parametrize(("adapter_cls", "device_cls", "operation"), PAIRS)
    def test_plug_in_matches_device_operation(
        self, adapter_cls: type, device_cls: type, operation: str
    ) -> None:
        """Verify plug_in() returns exactly the device's own result."""
        device = device_cls()
        adapter = adapter_cls(device)

        assert isinstance(adapter, Outlet)
        assert adapter.plug_in() == getattr(device, operation)()

    @pytest.mark.parametrize(("adapter_cls", "device_cls", "operation"), PAIRS)
    def test_plug_in_is_idempotent(
        self, adapter_cls: type, device_cls: type, operation: str
    ) -> None:
        adapter = adapter_cls(device_cls())

        results = {adapter.plug_in() for _ in range(5)}

        assert len(results) == 1

    @pytest.mark.parametrize(("adapter_cls", "device_cls", "operation"), PAIRS)
    def test_adapter_owns_given_device(
        self, adapter_cls: type, device_cls: type, operation: str
    ) -> None:
        device = device_cls()
        adapter = adapter_cls(device)

        assert adapter.device is device

    @pytest.mark.parametrize(("adapter_cls", "device_cls", "operation"), PAIRS)
    def test_device_cannot_be_reassigned(
        self, adapter_cls: type, device_cls: type, operation: str
    ) -> None:
        adapter = adapter_cls(device_cls())

        with pytest.raises(AttributeError):
            adapter.device = device_cls()

    @pytest.mark.parametrize(("adapter_cls", "device_cls", "operation"), PAIRS)
    def test_constructor_is_typed_with_matching_device(
        self, adapter_cls: type, device_cls: type, operation: str
    ) -> None:
        """Verify each adapter only accepts its own device type statically."""
        hints = get_type_hints(adapter_cls.__init__)
        hints.pop("return")

        assert list(hints.values()) == [device_cls]

    def test_plug_in_logs_device(self, log_events: list[dict[str, Any]]) -> None:
        LaptopAdapter(Laptop()).plug_in()

        assert log_events == [
            {
                "event": "outlet_plugged_in",
                "device": "laptop",
                "status": "Laptop is charging.",
                "log_level": "debug",
            }
        ]
