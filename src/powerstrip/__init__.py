"""PowerStrip: uniform outlets for incompatible devices.

Core Components:
    - devices: Laptop, Refrigerator and SmartphoneCharger, each with its own API
    - outlet: The Outlet interface every adapter implements
    - adapters: One Outlet adapter per device
    - registry: Menu-choice registry with dispatch (OutletRegistry)
    - console: Interactive menu loop (ConsoleController)
"""

from powerstrip.adapters import LaptopAdapter, RefrigeratorAdapter, SmartphoneAdapter
from powerstrip.devices import Laptop, Refrigerator, SmartphoneCharger
from powerstrip.errors import OutletError, OutletErrorCode
from powerstrip.outlet import Outlet

__all__ = [
    "Laptop",
    "LaptopAdapter",
    "Outlet",
    "OutletError",
    "OutletErrorCode",
    "Refrigerator",
    "RefrigeratorAdapter",
    "SmartphoneAdapter",
    "SmartphoneCharger",
]


def __getattr__(name: str):
    """Lazy import for the registry and console modules."""
    if name in ("OutletRegistry", "OutletSlot"):
        from powerstrip import registry

        return getattr(registry, name)
    if name in ("ConsoleController", "ControllerState"):
        from powerstrip import console

        return getattr(console, name)
    if name == "ConsoleSettings":
        from powerstrip import config

        return config.ConsoleSettings
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
