"""Adapters that expose devices through the Outlet interface.

Each adapter wraps exactly one device and forwards plug_in() to that
device's own operation:
    - LaptopAdapter: Laptop.charge()
    - RefrigeratorAdapter: Refrigerator.start_cooling()
    - SmartphoneAdapter: SmartphoneCharger.charge_phone()
"""

from powerstrip.adapters.laptop import LaptopAdapter
from powerstrip.adapters.refrigerator import RefrigeratorAdapter
from powerstrip.adapters.smartphone import SmartphoneAdapter

__all__ = ["LaptopAdapter", "RefrigeratorAdapter", "SmartphoneAdapter"]
