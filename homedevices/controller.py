"""Terminal controllers that let the user set a device level and report it."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from collections.abc import Callable, Sequence
from contextlib import suppress
from dataclasses import dataclass

from homedevices.power import Power, _format_float
from homedevices.server import _QUIT_KEYS, DEFAULT_HOST, DEFAULT_PORT, FRAME_DELAY, _gauge
from homedevices.socket import Socket
from homedevices.temperature import Temperature
from homedevices.termometer import Termometer

_INCREASE_KEY = "+"
_DECREASE_KEY = "-"


@dataclass
class DeviceController:
    """A device level the user moves up and down in fixed steps."""

    title: str
    level: float
    minimum: float
    maximum: float
    graduation: float
    format_message: Callable[[float], str]
    format_label: Callable[[float], str]
    scale: Callable[[float], float]
    running: bool = True

    def increase(self) -> str:
        """Raise the level by one step unless at the maximum; return the message."""
        if self.level < self.maximum:
            self.level += self.graduation
        return self.message()

    def decrease(self) -> str:
        """Lower the level by one step unless at the minimum; return the message."""
        if self.level > self.minimum:
            self.level -= self.graduation
        return self.message()

    def message(self) -> str:
        """The text sent to the server for the current level."""
        return self.format_message(self.level)

    def label(self) -> str:
        """The gauge label for the current level."""
        return self.format_label(self.level)

    def ratio(self) -> float:
        """Position of the current level on the gauge."""
        return self.scale(self.level)

    def handle_key(self, key: str) -> str | None:
        """Apply a key press; return the message to send, if any."""
        if key in _QUIT_KEYS:
            self.running = False
            return None
        if key == _INCREASE_KEY:
            return self.increase()
        if key == _DECREASE_KEY:
            return self.decrease()
        return None


def socket_controller() -> DeviceController:
    """A controller for a smart socket, starting at 1500 W."""
    return DeviceController(
        title='Управление розеткой. Нажмите ["+"/"-"] для изменения значений. Esc - выход',
        level=1500.0,
        minimum=Power.MIN_POWER,
        maximum=Power.MAX_POWER,
        graduation=Power.GRADUATION,
        format_message=lambda level: str(Socket(Power(level))),
        format_label=lambda level: (
            f"Мощность {level:.1f} W из {_format_float(Power.MAX_POWER)} W"
        ),
        scale=Power.ratio,
    )


def termometer_controller() -> DeviceController:
    """A controller for a thermometer, starting at 0 C."""
    return DeviceController(
        title='Управление термометром. Нажмите ["+"/"-"] для изменения значений. Esc - выход',
        level=0.0,
        minimum=Temperature.MIN_TEMPERATURE,
        maximum=Temperature.MAX_TEMPERATURE,
        graduation=Temperature.GRADUATION,
        format_message=lambda level: str(Termometer(Temperature(level))),
        format_label=lambda level: (
            f"Температура: {level:.2f} C из "
            f"{_format_float(Temperature.MAX_TEMPERATURE)} С"
        ),
        scale=Temperature.ratio,
    )


def send_message(text: str, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Open a connection to the server and send ``text``; raises OSError on failure."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(text.encode("utf-8"))


def _read_key(screen) -> str | None:
    code = screen.getch()
    if code < 0:
        return None
    if code == 27:
        return "esc"
    if code == 3:
        return "ctrl+c"
    if code < 0x110000:
        return chr(code)
    return None


def _draw(screen, controller: DeviceController) -> None:
    import curses

    height, width = screen.getmaxyx()
    screen.erase()
    lines = _gauge(controller.title, controller.label(), controller.ratio(), width)
    for row, line in enumerate(lines[: max(height - 2, 0)]):
        with suppress(curses.error):
            screen.addnstr(row, 0, line, max(width - 1, 0))
    screen.refresh()


def run(
    controller: DeviceController, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> None:
    """Show the gauge and send a message on every level change until quit."""
    import curses

    screen = curses.initscr()
    try:
        curses.noecho()
        curses.raw()
        screen.keypad(True)
        screen.nodelay(True)
        with suppress(AttributeError, curses.error):
            curses.set_escdelay(25)
        with suppress(curses.error):
            curses.curs_set(0)
        controller.running = True
        while controller.running:
            _draw(screen, controller)
            key = _read_key(screen)
            if key is None:
                time.sleep(FRAME_DELAY)
                continue
            text = controller.handle_key(key)
            if text is not None:
                send_message(text, host, port)
    finally:
        screen.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()


def _main(
    factory: Callable[[], DeviceController], description: str, argv: Sequence[str] | None
) -> int:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        run(factory(), args.host, args.port)
    except OSError as exc:
        print(f"Unable to connect: {exc}", file=sys.stderr)
        return 1
    return 0


def main_socket(argv: Sequence[str] | None = None) -> int:
    """Run the smart socket controller."""
    return _main(socket_controller, "Control a smart socket.", argv)


def main_termometer(argv: Sequence[str] | None = None) -> int:
    """Run the thermometer controller."""
    return _main(termometer_controller, "Control a thermometer.", argv)