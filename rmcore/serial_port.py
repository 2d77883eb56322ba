"""Serial port access through termios."""

from __future__ import annotations

import logging
import os
import termios
import threading
from collections.abc import Iterable
from enum import Enum

logger = logging.getLogger(__name__)

_OPEN_FLAGS = os.O_RDWR | os.O_NOCTTY | os.O_NONBLOCK


class BaudRate(Enum):
    BAUD_RATE_9600 = 9600
    BAUD_RATE_115200 = 115200
    BAUD_RATE_460800 = 460800


class StopBits(Enum):
    STOP_BITS_1 = 1
    STOP_BITS_2 = 2


class DataLength(Enum):
    DATA_LEN_5 = 5
    DATA_LEN_6 = 6
    DATA_LEN_7 = 7
    DATA_LEN_8 = 8


class SerialError(OSError):
    """The serial device could not be used."""


_SPEEDS = {
    BaudRate.BAUD_RATE_9600: getattr(termios, "B9600", None),
    BaudRate.BAUD_RATE_115200: getattr(termios, "B115200", None),
    BaudRate.BAUD_RATE_460800: getattr(termios, "B460800", None),
}
_CSIZES = {
    DataLength.DATA_LEN_5: termios.CS5,
    DataLength.DATA_LEN_6: termios.CS6,
    DataLength.DATA_LEN_7: termios.CS7,
}
_CRTSCTS = getattr(termios, "CRTSCTS", 0)


class SerialPort:
    """A serial device opened non-blocking and configured as a raw line."""

    DEFAULT_FALLBACKS = ("/dev/ttyACM1", "/dev/ttyACM0")

    def __init__(
        self,
        dev_path: str | None = None,
        fallbacks: Iterable[str] = DEFAULT_FALLBACKS,
    ) -> None:
        self._fd = -1
        self.path: str | None = None
        self._fallbacks = tuple(fallbacks)
        self._write_lock = threading.Lock()
        self._read_lock = threading.Lock()
        if dev_path is not None:
            self.open(dev_path)

    def open(self, dev_path: str = "") -> None:
        """Open dev_path, or a fallback device, then configure it.

        Raises SerialError when none of them opens.
        """
        self.close()
        for path in (dev_path, *self._fallbacks):
            if not path:
                continue
            try:
                self._fd = os.open(path, _OPEN_FLAGS)
            except OSError:
                continue
            self.path = path
            break
        else:
            logger.error("Can't open Serial device.")
            raise SerialError("Can't open Serial device.")
        self.config()

    def is_open(self) -> bool:
        """Whether a device is open."""
        logger.debug("Open serial handle %d", self._fd)
        return self._fd > 0

    def config(
        self,
        parity: bool = False,
        stop_bit: StopBits = StopBits.STOP_BITS_1,
        data_length: DataLength = DataLength.DATA_LEN_8,
        flow_ctrl: bool = False,
        baud_rate: BaudRate = BaudRate.BAUD_RATE_460800,
    ) -> bool:
        """Set line parameters; False when the device refuses them."""
        logger.info(
            "parity=%d, stop_bit=%s, data_length=%s, flow_ctrl=%d, baud_rate=%s",
            parity, stop_bit.name, data_length.name, flow_ctrl, baud_rate.name,
        )
        try:
            iflag, oflag, cflag, lflag, ispeed, ospeed, cc = termios.tcgetattr(self._fd)
        except (termios.error, OSError) as exc:
            logger.error("Error from tcgetattr: %s.", exc)
            return False

        if parity:
            cflag |= termios.PARENB
        else:
            cflag &= ~termios.PARENB
            iflag &= ~termios.INPCK

        if stop_bit is StopBits.STOP_BITS_2:
            cflag |= termios.CSTOPB
        else:
            cflag &= ~termios.CSTOPB

        if flow_ctrl:
            cflag |= _CRTSCTS
        else:
            cflag &= ~_CRTSCTS

        speed = _SPEEDS[baud_rate]
        if speed is None:
            logger.error("Baud rate %s is not supported here.", baud_rate.name)
            return False
        ispeed = ospeed = speed

        cflag |= termios.CLOCAL | termios.CREAD
        oflag &= ~termios.OPOST
        lflag &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        iflag &= ~(
            termios.ICRNL | termios.INLCR | termios.IGNCR
            | termios.IXON | termios.IXOFF | termios.IXANY
        )

        if data_length is DataLength.DATA_LEN_8:
            cflag &= ~termios.CSIZE
            cflag |= termios.CS8
        else:
            cflag |= _CSIZES[data_length]

        try:
            termios.tcflush(self._fd, termios.TCIOFLUSH)
            termios.tcsetattr(
                self._fd, termios.TCSANOW,
                [iflag, oflag, cflag, lflag, ispeed, ospeed, cc],
            )
        except (termios.error, OSError) as exc:
            logger.error("Error from tcsetattr: %s", exc)
            return False
        return True

    def _require_open(self) -> None:
        if self._fd < 0:
            raise SerialError("serial device is not open")

    def trans(self, data: bytes) -> int:
        """Write data; returns the number of bytes written."""
        self._require_open()
        with self._write_lock:
            return os.write(self._fd, data)

    def recv(self, size: int) -> bytes:
        """Read up to size bytes; empty when nothing is waiting."""
        self._require_open()
        with self._read_lock:
            try:
                return os.read(self._fd, size)
            except BlockingIOError:
                return b""

    def close(self) -> None:
        """Close the device if open."""
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()