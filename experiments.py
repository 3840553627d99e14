#experiments.py
import sys

from huffcodec.coders import HuffmanCoder
from huffcodec.errors import HuffmanError
from huffcodec.experiments import ComplexityExperiment
from huffcodec.huffman import huffman
from huffcodec.logger import Logger, EntropyLog
from huffcodec.performance_display import PerformanceDisplay, format_table
from huffcodec.probabilities import frequency, freq_to_prob, entropy, expected
from huffcodec.validators import validate_file_exists


MIXED_TEXT = "1234567890ABjBA1WROJEX(U@#X(@(#((@((@DKODJWOJEWOJWOeeeeeeeeeeeeeeee aaaaaaaccchhh '{;#@ghjLKJ"


def hand_made_code_demo():
    freqs = frequency("ABBA")
    print(format_table(freqs))

    probs = freq_to_prob(freqs)
    print(format_table(probs))
    print(f"Entropy is: {entropy(probs)}")

    codes = {"A": "0", "B": "1"}
    print(f"Expected Length: {expected(probs, codes)}")


def huffman_demo(text, logger, samples=("12 each", "12 Zebra")):
    freqs = frequency(text)
    print(format_table(freqs))

    probs = freq_to_prob(freqs)
    print(format_table(probs))

    codes = huffman(probs, logger)
    for symbol, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[1])):
        print(f"{symbol!r}: {code}")

    entropy_value = entropy(probs)
    expected_length = expected(probs, codes)
    logger.log(EntropyLog(entropy_value, expected_length))
    print(f"Entropy is: {entropy_value}")
    print(f"Expected Length: {expected_length}")

    coder = HuffmanCoder(codes, logger)
    for sample in samples:
        try:
            encoded = coder.encode(sample)
            print(f"Encoded: {encoded}")
            print(f"Decoded: {coder.decode(encoded)}")
        except HuffmanError as e:
            print(f"An error occurred while encoding {sample!r}: {e}")


def analyse_file(file_path, logger):
    """Run the Huffman demo on a text file. Returns False if the text could not be coded."""
    validate_file_exists(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        huffman_demo(text, logger, samples=(text[:64],))
    except HuffmanError as e:
        print(f"An error occurred while analysing {file_path}: {e}")
        return False
    return True


def main():
    logger = Logger()
    logger.display_info = False

    hand_made_code_demo()

    if len(sys.argv) > 1:
        analyse_file(sys.argv[1], logger)
    else:
        huffman_demo(MIXED_TEXT, logger)

    experiment = ComplexityExperiment(logger=logger)
    for result in experiment.run():
        print(result)

    pm = PerformanceDisplay(logger.logs)
    pm.generate_code_length_plot(show_graphs=True)
    pm.generate_benchmark_plot(show_graphs=True)


if __name__ == "__main__":
    main()
