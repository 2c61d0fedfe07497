"""The outlet interface shared by every adapter.

Clients only ever talk to an Outlet. They never need to know which device
sits behind it or what that device calls its own operation.
"""

from abc import ABC, abstractmethod


class Outlet(ABC):
    """Interface that all device adapters must implement.

    Example:
        class LampAdapter(Outlet):
            def __init__(self, lamp: Lamp) -> None:
                self._lamp = lamp

            def plug_in(self) -> str:
                return self._lamp.switch_on()
    """

    @abstractmethod
    def plug_in(self) -> str:
        """Power the device behind this outlet.

        Returns:
            The device's status message, unmodified.
        """
        ...
