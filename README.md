# homedevices

A small simulated smart home with two devices and a dashboard:

- a **thermometer** (`homedevices-termometer`), whose temperature moves from 0 to 100 °C in steps of 0.5, starting at 0;
- a **power socket** (`homedevices-socket`), whose power moves from 500 to 2000 W in steps of 2.5, starting at 1500;
- a **server** (`homedevices-server`), which listens on `localhost:8080` and shows the latest temperature and power as gauges, with a log of the messages it has received, newest first.

The screens are drawn with the standard-library `curses` module, so the commands need a terminal and a Python that has `curses` (Linux, macOS and other POSIX systems).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

Start the dashboard server first:

```
homedevices-server
```

In other terminals, start one or both device controllers:

```
homedevices-termometer
homedevices-socket
```

All three commands accept `--host` and `--port` (defaults `localhost` and `8080`).

In a controller, press `+` or `-` to change the value. Each key press that changes the level opens a new TCP connection to the server and sends one message. If the server cannot be reached, the controller prints `Unable to connect: ...` and exits with status 1. Press `Esc`, `q` or `Ctrl+C` to quit a controller or the server.

The server only accepts a reading that lies within the device's range; readings outside it are still logged but leave the gauge unchanged.

## Wire format

Each connection carries one plain-text message:

```
Termometer 21.500
Socket 1500 W
```

The server reads up to 128 bytes per connection. A message it does not recognise is answered with `Ok: <message>` followed by a newline and is logged as `Unknown data received.`

## Library use

```python
from homedevices.socket import Socket
from homedevices.termometer import Termometer

reading = Termometer.parse("Termometer 21.5 C")
print(reading.temperature.value)   # 21.5
print(str(reading))                # Termometer 21.500

plug = Socket.parse("Socket 1500 W")
print(plug.power.value)            # 1500.0
print(str(plug))                   # Socket 1500 W
```

If the text is not a valid device message, `Termometer.parse` raises `TermometerParseError` and `Socket.parse` raises `SocketParseError` (both subclasses of `ValueError`).

`Power` and `Temperature` hold a value in their `value` property; assigning a value outside `MIN_POWER`..`MAX_POWER` or `MIN_TEMPERATURE`..`MAX_TEMPERATURE` is ignored. `Power.ratio` and `Temperature.ratio` map a value onto the 0–1 scale the gauges use; `Power.ratio` gives 0.0 below the minimum.

`homedevices.message` has `ThermometerMessage` and `SocketMessage`: plain-number messages where zero means the device is off (`is_off()`). `SocketMessage` holds an integer from 0 to 255.

`homedevices.server` exposes the pieces of the dashboard:

- `parse_sensor_data(text)` returns a `SensorData` whose `kind` is a `SensorKind` (`TEMPERATURE`, `POWER` or `UNKNOWN`);
- `start_server(queue, host, port)` starts an asyncio server that puts every reading on an `asyncio.Queue`;
- `Dashboard` keeps the gauges and message log; `process_sensor_data`, `handle_key` and `render(width)` (which returns the screen as a list of lines).

`homedevices.controller` has `DeviceController` with `socket_controller()` and `termometer_controller()` factories, and `send_message(text, host, port)` to send one message to the server.