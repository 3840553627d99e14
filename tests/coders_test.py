import unittest
from io import BytesIO

from huffcodec.coders import BitOutputStream, BitInputStream, HuffmanCoder
from huffcodec.errors import EmptyAlphabet, InvalidCode, IncompleteCode, SymbolNotFoundInCodes
from huffcodec.huffman import huffman
from huffcodec.logger import Logger, CodingLog
from huffcodec.probabilities import frequency, freq_to_prob

MIXED_TEXT = "1234567890ABjBA1WROJEX(U@#X(@(#((@((@DKODJWOJEWOJWOeeeeeeeeeeeeeeee aaaaaaaccchhh '{;#@ghjLKJ"
SMALL_CODES = {'A': "0", 'B': "10", 'C': "11"}

class TestBitStreamHelpers(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1, 0, 1, 0, 1, 0]:
            bos.write(bit)
        self.assertEqual(bos.finish(), 0)
        self.assertEqual(out.getvalue(), bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_code("101")
        self.assertEqual(bos.finish(), 5)
        self.assertEqual(out.getvalue(), bytes([0b10100000]))

    def test_bit_input_stream(self):
        bis = BitInputStream(BytesIO(bytes([0b11001010])))
        bits = [bis.read() for _ in range(9)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0, -1])

    def test_invalid_bit_write(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write(2)

class TestHuffmanCoderConstruction(unittest.TestCase):
    def test_empty_table(self):
        with self.assertRaises(EmptyAlphabet):
            HuffmanCoder({})

    def test_empty_code(self):
        with self.assertRaises(InvalidCode):
            HuffmanCoder({'A': ""})

    def test_non_binary_code(self):
        with self.assertRaises(InvalidCode):
            HuffmanCoder({'A': "0", 'B': "12"})

    def test_not_prefix_free(self):
        with self.assertRaises(InvalidCode) as ctx:
            HuffmanCoder({'A': "0", 'B': "01"})
        self.assertEqual(ctx.exception.code, "0")

class TestHuffmanCoder(unittest.TestCase):
    def setUp(self):
        self.codes = huffman(freq_to_prob(frequency(MIXED_TEXT)))
        self.coder = HuffmanCoder(self.codes)

    def test_encode_small(self):
        self.assertEqual(HuffmanCoder(SMALL_CODES).encode("ABCA"), "010110")

    def test_round_trip(self):
        for text in [MIXED_TEXT, "12 each", "", "eeee"]:
            self.assertEqual(self.coder.decode(self.coder.encode(text)), text)

    def test_encoded_length_matches_codes(self):
        encoded = self.coder.encode(MIXED_TEXT)
        self.assertEqual(len(encoded), sum(len(self.codes[s]) for s in MIXED_TEXT))

    def test_unknown_symbol(self):
        with self.assertRaises(SymbolNotFoundInCodes) as ctx:
            self.coder.encode("12 Zebra")
        self.assertEqual(ctx.exception.symbol, 'Z')

    def test_encode_rejects_non_text(self):
        with self.assertRaises(ValueError):
            self.coder.encode(b"AB")

    def test_decode_invalid_character(self):
        with self.assertRaises(InvalidCode):
            HuffmanCoder(SMALL_CODES).decode("012")

    def test_decode_truncated(self):
        with self.assertRaises(IncompleteCode) as ctx:
            HuffmanCoder(SMALL_CODES).decode("01")
        self.assertEqual(ctx.exception.bits, "1")

    def test_decode_prefix_without_code(self):
        with self.assertRaises(IncompleteCode) as ctx:
            HuffmanCoder({'A': "0", 'B': "10"}).decode("011")
        self.assertEqual(ctx.exception.bits, "11")

    def test_single_symbol_round_trip(self):
        coder = HuffmanCoder(huffman({'A': 1.0}))
        self.assertEqual(coder.encode("AAA"), "000")
        self.assertEqual(coder.decode("000"), "AAA")

    def test_coding_log(self):
        logger = Logger()
        logger.display_progress = False
        HuffmanCoder(SMALL_CODES, logger).encode("ABC")
        logs = logger.of_type(CodingLog)
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].symbol_count, 3)
        self.assertEqual(logs[0].encoded_size, 5)
        self.assertEqual(logger.coding_progress_count, 3)

    def test_coding_progress_restarts_per_text(self):
        logger = Logger()
        logger.display_progress = False
        coder = HuffmanCoder(SMALL_CODES, logger)
        coder.encode("ABC")
        coder.encode("AB")
        self.assertEqual(logger.coding_progress_count, 2)

class TestHuffmanCoderBytes(unittest.TestCase):
    def setUp(self):
        self.coder = HuffmanCoder(SMALL_CODES)

    def test_encode_to_bytes(self):
        # "01011" padded with three zero bits.
        self.assertEqual(self.coder.encode_to_bytes("ABC"), bytes([3, 0b01011000]))

    def test_bytes_round_trip(self):
        for text in ["ABC", "", "AAAAAAAA", "CBACBACBACBA"]:
            self.assertEqual(self.coder.decode_from_bytes(self.coder.encode_to_bytes(text)), text)

    def test_empty_text(self):
        self.assertEqual(self.coder.encode_to_bytes(""), bytes([0]))

    def test_missing_header(self):
        with self.assertRaises(ValueError):
            self.coder.decode_from_bytes(b"")

    def test_invalid_padding(self):
        with self.assertRaises(ValueError):
            self.coder.decode_from_bytes(bytes([9, 0]))
        with self.assertRaises(ValueError):
            self.coder.decode_from_bytes(bytes([3]))

    def test_truncated_payload(self):
        # Claiming four padding bits leaves "0101", which stops inside a code word.
        with self.assertRaises(IncompleteCode):
            self.coder.decode_from_bytes(bytes([4, 0b01011000]))

if __name__ == '__main__':
    unittest.main()
