"""Devices that can be connected to the power strip.

Each device exposes a single operation with its own name. None of them
implement the Outlet interface; the adapters in powerstrip.adapters bridge
the gap.

Classes:
    - Laptop: Charges via charge()
    - Refrigerator: Cools via start_cooling()
    - SmartphoneCharger: Charges a phone via charge_phone()
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Laptop:
    """A laptop that charges when powered."""

    def charge(self) -> str:
        return "Laptop is charging."


@dataclass(frozen=True)
class Refrigerator:
    """A refrigerator that starts its cooling cycle when powered."""

    def start_cooling(self) -> str:
        return "Refrigerator is cooling."


@dataclass(frozen=True)
class SmartphoneCharger:
    """A smartphone charger that charges the attached phone."""

    def charge_phone(self) -> str:
        return "Smartphone is charging."
