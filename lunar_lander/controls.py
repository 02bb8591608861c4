"""
Input state shared between the event pump and the simulation tick.

The event pump records which logical controls are held and queues
edge-triggered commands and typed text in arrival order; the world reads
both once at the start of a tick.
"""
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, List, Set, Union

from . import config as C


class Control(Enum):
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    THRUST = "thrust"


class Command(Enum):
    RESTART = "restart"
    QUIT = "quit"
    CONFIRM = "confirm"
    BACKSPACE = "backspace"


def filter_initials(current: str, text: str) -> str:
    """Append letters from text, uppercased, up to the initials length. Anything else is dropped."""
    for ch in text:
        if len(current) >= C.INITIALS_LENGTH:
            break
        if ch.isascii() and ch.isalpha():
            current += ch.upper()
    return current


class InputState:
    """Held controls plus one ordered queue of commands and typed text."""

    def __init__(self):
        self.held: Set[Control] = set()
        self.events: Deque[Union[Command, str]] = deque()

    def press(self, control: Control) -> None:
        self.held.add(control)

    def release(self, control: Control) -> None:
        self.held.discard(control)

    def push(self, command: Command) -> None:
        self.events.append(command)

    def type_text(self, text: str) -> None:
        if text:
            self.events.append(text)

    def drain(self) -> List[Union[Command, str]]:
        """Commands and typed text in the order they arrived."""
        out = list(self.events)
        self.events.clear()
        return out

    def clear(self) -> None:
        self.held.clear()
        self.events.clear()
