"""Interactive console controller.

The controller shows a numbered menu, reads one line per iteration, plugs in
the selected outlet and prints the device's status. It loops until the exit
choice is entered or stdin is exhausted.

Classes:
    - ControllerState: States of the menu loop
    - ConsoleController: Drives the menu loop over an OutletRegistry

Functions:
    - build_registry: Wire the default laptop, refrigerator and smartphone outlets
    - parse_choice: Convert a raw input line to a menu number
"""

import sys
from enum import Enum
from typing import TextIO

import structlog
import typer

from powerstrip.adapters import LaptopAdapter, RefrigeratorAdapter, SmartphoneAdapter
from powerstrip.config import ConsoleSettings
from powerstrip.devices import Laptop, Refrigerator, SmartphoneCharger
from powerstrip.errors import OutletError, OutletErrorCode
from powerstrip.registry import OutletRegistry

logger = structlog.get_logger()


class ControllerState(str, Enum):
    """States of the menu loop.

    State transitions:
        AWAITING_CHOICE -> AWAITING_CHOICE: outlet selected or invalid input
        AWAITING_CHOICE -> EXITING: exit choice entered or end of input
    """

    AWAITING_CHOICE = "awaiting_choice"
    EXITING = "exiting"


def build_registry() -> OutletRegistry:
    """Create a registry with one adapter per supported device.

    Returns:
        Registry with Laptop on 1, Refrigerator on 2 and Smartphone on 3.
    """
    registry = OutletRegistry()
    registry.register(1, "Laptop", LaptopAdapter(Laptop()))
    registry.register(2, "Refrigerator", RefrigeratorAdapter(Refrigerator()))
    registry.register(3, "Smartphone", SmartphoneAdapter(SmartphoneCharger()))
    return registry


def parse_choice(raw: str) -> int:
    """Parse a menu choice from a line of input.

    Args:
        raw: The line as read from the console.

    Returns:
        The selected menu number.

    Raises:
        OutletError: If the line is not an integer.
    """
    text = raw.strip()
    try:
        return int(text)
    except ValueError as e:
        raise OutletError(
            code=OutletErrorCode.INVALID_CHOICE,
            message=f"Not a number: {text!r}",
            cause=e,
        ) from e


class ConsoleController:
    """Menu loop that plugs in outlets chosen on the console.

    Attributes:
        _registry: Outlets available from the menu.
        _settings: Prompt, exit and error strings.
        _stdin: Stream to read choices from; sys.stdin when not given.
        _state: Current loop state.
        _dispatched: Outlets plugged in during the current session.

    Example:
        controller = ConsoleController()
        controller.run()
    """

    def __init__(
        self,
        registry: OutletRegistry | None = None,
        settings: ConsoleSettings | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            registry: Outlets to offer. Defaults to build_registry().
            settings: Console settings. Defaults to ConsoleSettings().
            stdin: Input stream. Defaults to sys.stdin at run time.

        Raises:
            OutletError: If the exit choice is also assigned to an outlet.
        """
        self._registry = registry if registry is not None else build_registry()
        self._settings = settings if settings is not None else ConsoleSettings()
        self._stdin = stdin
        self._state = ControllerState.AWAITING_CHOICE
        self._dispatched = 0

        if self._settings.exit_choice in self._registry:
            raise OutletError(
                code=OutletErrorCode.CONFIG_INVALID,
                message="Exit choice collides with a registered outlet",
                choice=self._settings.exit_choice,
            )

    @property
    def state(self) -> ControllerState:
        """Return the current loop state."""
        return self._state

    def menu_lines(self) -> list[str]:
        """Render the menu entries, exit entry last."""
        lines = [
            f"{slot.choice}. {slot.label}" for slot in self._registry.list_slots()
        ]
        lines.append(f"{self._settings.exit_choice}. {self._settings.exit_label}")
        return lines

    def show_menu(self) -> None:
        """Print the menu followed by the prompt."""
        for line in self.menu_lines():
            typer.echo(line)
        typer.echo(self._settings.prompt, nl=False)

    def step(self, raw: str | None) -> ControllerState:
        """Handle one line of input.

        Args:
            raw: The line read from the console, or None at end of input.

        Returns:
            The state after handling the line.

        Raises:
            OutletError: For non-recoverable errors raised by the registry.
        """
        if raw is None:
            logger.info("end_of_input")
            return self._exit()

        try:
            choice = parse_choice(raw)
            if choice == self._settings.exit_choice:
                return self._exit()
            status = self._registry.dispatch(choice)
        except OutletError as e:
            if not e.recoverable:
                raise
            logger.warning("invalid_choice", raw=raw.strip(), code=e.code.value)
            typer.echo(self._settings.invalid_choice_message)
            return self._state

        typer.echo(status)
        self._dispatched += 1
        return self._state

    def run(self) -> int:
        """Run the menu loop until the user exits.

        Returns:
            Number of outlets plugged in during the session.
        """
        stream = self._stdin if self._stdin is not None else sys.stdin
        self._state = ControllerState.AWAITING_CHOICE
        self._dispatched = 0

        while self._state is ControllerState.AWAITING_CHOICE:
            self.show_menu()
            line = stream.readline()
            if not line:
                # Prompt was left without a newline.
                typer.echo()
            self.step(line or None)

        return self._dispatched

    def _exit(self) -> ControllerState:
        typer.echo(self._settings.exit_message)
        self._state = ControllerState.EXITING
        logger.info("controller_exiting", dispatched=self._dispatched)
        return self._state
