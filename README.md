# rmcore

Building blocks for a competition robot's onboard controller.

## Modules

- `rmcore.common`: game and component enums (`Team`, `Race`, `Arm`, `Model`,
  `AimMethod`, `BuffState`, `RFID`, `Direction`, `FilterMethod`), the `Euler`
  angle record and the `Alert` flags. `to_string` gives the readable name of
  an `Euler` or any of these enums. `string_to_model` and
  `string_to_aim_method` parse names or numbers case-insensitively and return
  `UNKNOWN` for anything else. `has_big_armor` is true for `Model.HERO` and
  `Model.SENTRY`. Small helpers: `relative_difference`,
  `get_int_random_value`, `get_real_random_value` (bounds in either order) and
  `file_exist`, which logs an error when the path is missing.
- `rmcore.log`: `set_logger(path, fmt, level)` attaches a console handler using
  one of the `FMT` formats and a file handler (truncated on each call) to the
  `rmcore` logger. `to_format_string` returns the format for an `FMT`;
  `get_level_string` reports the active level as a lower-case name.
- `rmcore.semaphore`: `Semaphore`, a counting semaphore with `init`, `signal`
  and `wait(timeout=None)`, which returns `False` when the timeout runs out.
- `rmcore.timer`: `Timer` measures whole milliseconds between `start()` and
  `calc()`; `Recorder` counts events with `record()` and reports the count
  once per interval from a background thread until `close()`, or until more
  than ten intervals pass with no events.
- `rmcore.crc16`: `crc16_calc(data, crc)` and `crc16_verify(data)`, the
  checksum used on the controller link. A frame ends in its CRC,
  little-endian.
- `rmcore.workers`: `AsyncWorker`, an abstract base for a pool of threads
  sharing a source queue and a result queue; subclasses implement
  `work(index)`.
- `rmcore.behavior`: `Behavior` turns referee figures (`update`), an aiming
  `Euler` (`aim`), a chassis speed (`move`) and an `Alert` (`set_notice`) into
  a `DownData` command with `Notice` bits, `Gimbal` angles and a
  `ChassisMove` vector.
- `rmcore.serial_port`: `SerialPort` opens a POSIX serial device (falling back
  to `/dev/ttyACM1` and `/dev/ttyACM0`), configures it as a raw line with
  `config` (`BaudRate`, `StopBits`, `DataLength`), and offers `trans`,
  `recv` and `close`. It raises `SerialError` when no device opens.

## Installation

```
pip install .
```

## Examples

```python
from rmcore.crc16 import crc16_calc, crc16_verify

payload = b"\x01\x02\x03"
crc = crc16_calc(payload, 0xFFFF)
frame = payload + crc.to_bytes(2, "little")
assert crc16_verify(frame)
```

```python
from rmcore.behavior import Behavior, NodeState
from rmcore.common import Euler

manager = Behavior(NodeState())
manager.update(base_hp=300, sentry_hp=400, bullet_num=200)
manager.aim(Euler(1, 1, 1))
manager.move(1.0)
print(manager.data)
```

## What is not included

The package is a library only: it installs no command and has no main
control loop. It has no behaviour-tree engine and no servo driver; camera
capture and vision are not part of it either.