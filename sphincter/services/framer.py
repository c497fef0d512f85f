# =======================================================================================
# sphincter/services/framer.py - Credential Reader Framing
# =======================================================================================
from typing import BinaryIO, Iterator
import serial
from ..utils.exceptions import StreamFault

START_OF_FRAME = b"\x02"
END_OF_FRAME = b"\x03"


class TokenFramer:
    """
    Splits the reader byte stream into tokens.

    Bytes are accumulated until END_OF_FRAME; every START_OF_FRAME and
    END_OF_FRAME byte is removed from the accumulated buffer and the rest is
    emitted as one token. Iteration never ends on its own: a read error or a
    closed stream raises StreamFault.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "ascii"):
        self.stream = stream
        self.encoding = encoding
        self._buffer = bytearray()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        while True:
            end = self._buffer.find(END_OF_FRAME)
            if end >= 0:
                frame = bytes(self._buffer[:end])
                del self._buffer[: end + 1]
                return self.decode(frame)
            self._buffer.extend(self._read())

    def _read(self) -> bytes:
        try:
            # Pull whatever the port already holds, block for at least one byte.
            size = getattr(self.stream, "in_waiting", 0) or 1
            chunk = self.stream.read(size)
        except (serial.SerialException, OSError) as e:
            raise StreamFault(f"Reader stream failed: {e}") from e
        if not chunk:
            raise StreamFault("Reader stream closed")
        return chunk

    def decode(self, frame: bytes) -> str:
        frame = frame.replace(START_OF_FRAME, b"").replace(END_OF_FRAME, b"")
        # Undecodable bytes are kept as U+FFFD, never dropped.
        return frame.decode(self.encoding, errors="replace")
