"""
coders.py

Encoding and decoding text with a prefix-free code table.

"""


from io import BytesIO
from typing import Dict, IO, Mapping, Optional

from .errors import EmptyAlphabet, InvalidCode, IncompleteCode, SymbolNotFoundInCodes
from .huffman import prefix_conflict
from .logger import Logger, CodingLog, CodingProgressStep
from .models import Symbol, CodeTable
from .validators import validate_type


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a BytesIO or a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_code(self, code: str) -> None:
        """Write every bit of a '0'/'1' code word."""
        for char in code:
            self.write(1 if char == "1" else 0)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> int:
        """
        Flush any remaining bits to the stream by padding with zeros.

        Returns:
            int: The number of padding bits added.
        """
        padding = 0
        if self.num_bits_filled > 0:
            padding = 8 - self.num_bits_filled
            self.current_byte = self.current_byte << padding
            self.flush_current_byte()
        self.out.flush()
        return padding


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        return (self.current_byte >> self.num_bits_remaining) & 1


class HuffmanCoder:
    """
    Encodes text into a bit string, and back, using a prefix-free code table.
    """

    def __init__(self, codes: Mapping[Symbol, str], logger: Optional[Logger] = None) -> None:
        """
        Args:
            codes (Mapping[Symbol, str]): Symbol to code word, e.g. the output of huffman().
            logger (Optional[Logger]): Logger instance for logging.

        Raises:
            EmptyAlphabet: The table is empty.
            InvalidCode: A code word is empty, not binary, or a prefix of another one.
        """
        if not codes:
            raise EmptyAlphabet()
        for code in codes.values():
            if not isinstance(code, str) or not code or set(code) - {"0", "1"}:
                raise InvalidCode(code)
        conflict = prefix_conflict(codes)
        if conflict is not None:
            raise InvalidCode(conflict)

        self.codes: CodeTable = dict(codes)
        self.symbols_by_code: Dict[str, Symbol] = {code: symbol for symbol, code in self.codes.items()}
        self.max_code_length: int = max(len(code) for code in self.codes.values())
        self.logger: Optional[Logger] = logger

    def encode(self, text: str) -> str:
        """
        Concatenate the code words of every symbol in text.

        Raises:
            SymbolNotFoundInCodes: text contains a symbol that has no code.
        """
        validate_type(text, "text", str)
        if self.logger is not None:
            self.logger.reset_coding_progress()
        parts = []
        for symbol in text:
            code = self.codes.get(symbol)
            if code is None:
                raise SymbolNotFoundInCodes(symbol)
            parts.append(code)
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols", len(text)))
        bits = "".join(parts)
        if self.logger is not None:
            self.logger.log(CodingLog(len(text), len(bits)))
        return bits

    def decode(self, bits: str) -> str:
        """
        Split a bit string back into symbols.

        Raises:
            InvalidCode: bits contains something other than '0' and '1'.
            IncompleteCode: bits ends inside a code word or runs into a prefix matching no code.
        """
        validate_type(bits, "bits", str)
        symbols = []
        current_code = ""
        for bit in bits:
            if bit not in ("0", "1"):
                raise InvalidCode(bit)
            current_code += bit
            symbol = self.symbols_by_code.get(current_code)
            if symbol is not None:
                symbols.append(symbol)
                current_code = ""
            elif len(current_code) >= self.max_code_length:
                raise IncompleteCode(current_code)
        if current_code:
            raise IncompleteCode(current_code)
        return "".join(symbols)

    def encode_to_bytes(self, text: str) -> bytes:
        """
        Encode text and pack the bits into bytes, most significant bit first.

        The first byte holds the number of zero bits padding the last byte.
        """
        bits = self.encode(text)
        out = BytesIO()
        stream = BitOutputStream(out)
        stream.write_code(bits)
        padding = stream.finish()
        return bytes((padding,)) + out.getvalue()

    def decode_from_bytes(self, data: bytes) -> str:
        """
        Unpack bytes produced by encode_to_bytes and decode them.

        Raises:
            ValueError: The padding header is missing or out of range.
            IncompleteCode: The payload does not decode to whole code words.
        """
        validate_type(data, "data", bytes)
        if len(data) == 0:
            raise ValueError("Data is missing the padding header")
        padding = data[0]
        if padding > 7 or (padding > 0 and len(data) == 1):
            raise ValueError(f"Invalid padding header: {padding}")

        stream = BitInputStream(BytesIO(data[1:]))
        bits = []
        bit = stream.read()
        while bit != -1:
            bits.append("1" if bit else "0")
            bit = stream.read()
        if padding:
            bits = bits[:-padding]
        return self.decode("".join(bits))
