"""Console configuration model.

Models:
    - ConsoleSettings: User-visible strings and the exit choice of the menu
"""

from pydantic import BaseModel, Field


class ConsoleSettings(BaseModel):
    """Settings for the interactive console.

    Attributes:
        prompt: Text printed (without newline) before each read.
        exit_label: Label of the exit entry in the menu.
        exit_choice: Menu number that ends the session.
        exit_message: Line printed when the session ends.
        invalid_choice_message: Line printed for unparseable or unknown input.
    """

    prompt: str = "Enter your choice: "
    exit_label: str = "Exit"
    exit_choice: int = Field(default=4, ge=1)
    exit_message: str = "Exiting..."
    invalid_choice_message: str = "Invalid choice. Please try again."
