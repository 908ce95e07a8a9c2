"""Dashboard server that collects readings sent by devices over TCP."""

from __future__ import annotations

import argparse
import asyncio
import sys
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum

from homedevices.power import Power, _format_float
from homedevices.socket import Socket, SocketParseError
from homedevices.temperature import Temperature
from homedevices.termometer import Termometer, TermometerParseError

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080
READ_LIMIT = 128
QUEUE_SIZE = 32
FRAME_DELAY = 0.02

_GAUGE_HEIGHT = 3
_MIN_MESSAGE_ROWS = 3
_QUIT_KEYS = frozenset({"esc", "\x1b", "q", "ctrl+c", "ctrl+C", "\x03"})


class SensorKind(Enum):
    """What a received message turned out to be."""

    TEMPERATURE = "temperature"
    POWER = "power"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SensorData:
    """A reading received from a device; ``value`` is None for unknown data."""

    kind: SensorKind
    value: float | None = None


def parse_sensor_data(text: str) -> SensorData:
    """Recognise a thermometer or socket message; anything else is unknown."""
    with suppress(TermometerParseError):
        termometer = Termometer.parse(text)
        return SensorData(SensorKind.TEMPERATURE, termometer.temperature.value)
    with suppress(SocketParseError):
        socket = Socket.parse(text)
        return SensorData(SensorKind.POWER, socket.power.value)
    return SensorData(SensorKind.UNKNOWN)


async def handle_connection(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> SensorData:
    """Read one message from a client and close the connection.

    Unrecognised messages are acknowledged with ``"Ok: <message>\\n"``.
    """
    try:
        received = (await reader.read(READ_LIMIT)).decode("utf-8", errors="replace")
        data = parse_sensor_data(received)
        if data.kind is SensorKind.UNKNOWN:
            writer.write(f"Ok: {received}\n".encode("utf-8"))
            await writer.drain()
        return data
    finally:
        writer.close()
        with suppress(OSError):
            await writer.wait_closed()


async def start_server(
    queue: asyncio.Queue[SensorData],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> asyncio.AbstractServer:
    """Listen for devices and put every reading they send on ``queue``."""

    async def on_client(
        reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            data = await handle_connection(reader, writer)
        except Exception as exc:  # noqa: BLE001 - one bad client must not stop the server
            print(f"Error handling connection: {exc!r}", file=sys.stderr)
            return
        await queue.put(data)

    return await asyncio.start_server(on_client, host, port)


def _top_border(title: str, inner: int) -> str:
    title = title[:inner]
    return "┌" + title + "─" * (inner - len(title)) + "┐"


def _bottom_border(inner: int) -> str:
    return "└" + "─" * inner + "┘"


def _gauge(title: str, label: str, ratio: float, width: int) -> list[str]:
    inner = max(width - 2, 0)
    ratio = min(max(ratio, 0.0), 1.0)
    filled = round(ratio * inner)
    cells = ["█"] * filled + [" "] * (inner - filled)
    label = label[:inner]
    start = (inner - len(label)) // 2
    cells[start : start + len(label)] = label
    return [_top_border(title, inner), "│" + "".join(cells) + "│", _bottom_border(inner)]


class Dashboard:
    """State of the server screen: two gauges and a log of received messages."""

    def __init__(
        self, termometer: Termometer | None = None, socket: Socket | None = None
    ) -> None:
        self.termometer = termometer if termometer is not None else Termometer()
        self.socket = socket if socket is not None else Socket()
        self.messages: list[str] = []
        self.running = True

    def process_sensor_data(self, data: SensorData) -> None:
        """Apply a reading and log it, newest message first."""
        if data.kind is SensorKind.TEMPERATURE:
            self.termometer.temperature.value = data.value
            text = f"🌡️Temperature set to {_format_float(data.value)} C"
        elif data.kind is SensorKind.POWER:
            self.socket.power.value = data.value
            text = f"⚡ Power set to {_format_float(data.value)} W"
        else:
            text = "Unknown data received."
        self.messages.insert(0, text)

    def handle_key(self, key: str) -> None:
        """Stop the dashboard on Esc, ``q`` or Ctrl+C."""
        if key in _QUIT_KEYS:
            self.running = False

    def temperature_label(self) -> str:
        return (
            f"Температура: {self.termometer.temperature.value:.2f} C "
            f"из {_format_float(Temperature.MAX_TEMPERATURE)} С"
        )

    def power_label(self) -> str:
        return (
            f"Мощность {self.socket.power.value:.1f} W "
            f"из {_format_float(Power.MAX_POWER)} W"
        )

    def render(self, width: int) -> list[str]:
        """Lines of the screen, showing every logged message."""
        return self._render(width, max(len(self.messages), _MIN_MESSAGE_ROWS))

    def _layout(self, width: int, height: int) -> list[str]:
        rows = max(height - 2 * _GAUGE_HEIGHT - 2, 0)
        return self._render(width, rows)

    def _render(self, width: int, message_rows: int) -> list[str]:
        lines = _gauge(
            "Термометер",
            self.temperature_label(),
            Temperature.ratio(self.termometer.temperature.value),
            width,
        )
        lines += _gauge(
            "Розетка",
            self.power_label(),
            Power.ratio(self.socket.power.value),
            width,
        )
        inner = max(width - 2, 0)
        visible = self.messages[:message_rows]
        rows = [""] * (message_rows - len(visible)) + list(reversed(visible))
        lines.append(_top_border("Сообщения", inner))
        lines.extend("│" + row[:inner].ljust(inner) + "│" for row in rows)
        lines.append(_bottom_border(inner))
        return lines


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


def _draw(screen, dashboard: Dashboard) -> None:
    import curses

    height, width = screen.getmaxyx()
    screen.erase()
    for row, line in enumerate(dashboard._layout(width, height)[:height]):
        with suppress(curses.error):
            screen.addnstr(row, 0, line, max(width - 1, 0))
    screen.refresh()


async def _serve(host: str, port: int) -> None:
    import curses

    queue: asyncio.Queue[SensorData] = asyncio.Queue(maxsize=QUEUE_SIZE)
    server = await start_server(queue, host, port)
    dashboard = Dashboard(Termometer(Temperature(0.0)), Socket(Power(0.0)))
    async with server:
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
            while dashboard.running:
                with suppress(asyncio.QueueEmpty):
                    dashboard.process_sensor_data(queue.get_nowait())
                _draw(screen, dashboard)
                key = _read_key(screen)
                if key is None:
                    await asyncio.sleep(FRAME_DELAY)
                else:
                    dashboard.handle_key(key)
                    await asyncio.sleep(0)
        finally:
            screen.keypad(False)
            curses.noraw()
            curses.echo()
            curses.endwin()


def main(argv: list[str] | None = None) -> int:
    """Run the dashboard server until the user quits."""
    parser = argparse.ArgumentParser(description="Show readings sent by home devices.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(_serve(args.host, args.port))
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())