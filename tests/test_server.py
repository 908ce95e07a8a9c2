import asyncio

import pytest

from homedevices.power import Power
from homedevices.server import (
    Dashboard,
    SensorData,
    SensorKind,
    handle_connection,
    parse_sensor_data,
    start_server,
)
from homedevices.socket import Socket
from homedevices.temperature import Temperature
from homedevices.termometer import Termometer


def _dashboard():
    return Dashboard(Termometer(Temperature(0.0)), Socket(Power(0.0)))


def test_parse_termometer_message():
    assert parse_sensor_data("Termometer 21.5 C") == SensorData(
        SensorKind.TEMPERATURE, 21.5
    )


def test_parse_socket_message():
    assert parse_sensor_data("Socket  1500 W") == SensorData(SensorKind.POWER, 1500.0)


@pytest.mark.parametrize("text", ["Termometer x C", "Socket -x- W", "hello", ""])
def test_parse_unknown_message(text):
    data = parse_sensor_data(text)
    assert data.kind is SensorKind.UNKNOWN
    assert data.value is None


def test_process_temperature_updates_and_logs():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.TEMPERATURE, 21.5))
    assert dashboard.termometer.temperature.value == 21.5
    assert dashboard.messages == ["🌡️Temperature set to 21.5 C"]


def test_process_power_updates_and_logs():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.POWER, 1500.0))
    assert dashboard.socket.power.value == 1500.0
    assert dashboard.messages == ["⚡ Power set to 1500 W"]


def test_out_of_range_power_is_logged_but_ignored():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.POWER, 21.5))
    assert dashboard.socket.power.value == 0.0
    assert len(dashboard.messages) == 1


def test_unknown_data_logged_newest_first():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.TEMPERATURE, 21.0))
    dashboard.process_sensor_data(SensorData(SensorKind.UNKNOWN))
    assert dashboard.messages[0] == "Unknown data received."
    assert dashboard.messages[1].startswith("🌡️Temperature")


@pytest.mark.parametrize("key", ["esc", "q", "ctrl+c", "ctrl+C"])
def test_quit_keys_stop_dashboard(key):
    dashboard = _dashboard()
    dashboard.handle_key(key)
    assert dashboard.running is False


@pytest.mark.parametrize("key", ["+", "-", "c", "x"])
def test_other_keys_keep_running(key):
    dashboard = _dashboard()
    dashboard.handle_key(key)
    assert dashboard.running is True


def test_render_lines_have_requested_width():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.POWER, 1500.0))
    lines = dashboard.render(60)
    assert all(len(line) == 60 for line in lines)
    assert any("Мощность 1500.0 W из 2000 W" in line for line in lines)
    assert any("Температура: 0.00 C из 100 С" in line for line in lines)


def test_render_newest_message_is_lowest():
    dashboard = _dashboard()
    dashboard.process_sensor_data(SensorData(SensorKind.TEMPERATURE, 21.0))
    dashboard.process_sensor_data(SensorData(SensorKind.UNKNOWN))
    text = "\n".join(dashboard.render(60))
    assert text.index("Temperature set to 21 C") < text.index("Unknown data received.")


def test_higher_temperature_fills_more_of_gauge():
    low = _dashboard()
    low.process_sensor_data(SensorData(SensorKind.TEMPERATURE, 10.0))
    high = _dashboard()
    high.process_sensor_data(SensorData(SensorKind.TEMPERATURE, 90.0))
    assert low.render(80)[1].count("█") < high.render(80)[1].count("█")


async def _exchange(port, payload):
    reader, writer = await asyncio.open_connection("127.0.0.1", port)
    writer.write(payload)
    await writer.drain()
    response = await reader.read()
    writer.close()
    await writer.wait_closed()
    return response


@pytest.mark.asyncio
async def test_server_queues_termometer_reading():
    queue = asyncio.Queue()
    server = await start_server(queue, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        response = await _exchange(port, b"Termometer 21.5 C")
        data = await asyncio.wait_for(queue.get(), timeout=5)
    assert data == SensorData(SensorKind.TEMPERATURE, 21.5)
    assert response == b""


@pytest.mark.asyncio
async def test_server_acknowledges_unknown_message():
    queue = asyncio.Queue()
    server = await start_server(queue, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        response = await _exchange(port, b"hello")
        data = await asyncio.wait_for(queue.get(), timeout=5)
    assert response == b"Ok: hello\n"
    assert data.kind is SensorKind.UNKNOWN


@pytest.mark.asyncio
async def test_handle_connection_parses_socket_message():
    results = []

    async def on_client(reader, writer):
        results.append(await handle_connection(reader, writer))

    server = await asyncio.start_server(on_client, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    async with server:
        await _exchange(port, b"Socket 21.5 W")
    assert results == [SensorData(SensorKind.POWER, 21.5)]