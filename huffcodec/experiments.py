#experiments.py
import random
import time
from typing import Callable, Dict, List, Optional, Sequence

from .huffman import huffman
from .logger import Logger, BenchmarkLog
from .probabilities import frequency, freq_to_prob, entropy
from .settings import BENCHMARK_SIZES, BENCHMARK_ALPHABET, BENCHMARK_REPEATS, SEED


class BenchmarkResult:
    def __init__(self, function_name: str, size: int, seconds: float) -> None:
        self.function_name = function_name
        self.size = size
        self.seconds = seconds

    def __repr__(self) -> str:
        return f"[{self.function_name}, {self.size}, {self.seconds:.6f}]"


class ComplexityExperiment:
    """
    Rough big-O check: times the table functions on growing inputs.

    Each function is run `repeats` times per size and the best time is kept.
    """
    def __init__(self, sizes: Sequence[int] = BENCHMARK_SIZES, alphabet: str = BENCHMARK_ALPHABET,
                 repeats: int = BENCHMARK_REPEATS, shuffle: bool = False, logger: Optional[Logger] = None):
        for size in sizes:
            if not isinstance(size, int) or size <= 0:
                raise ValueError(f"Benchmark sizes must be positive integers, got {size!r}")
        if not alphabet:
            raise ValueError("Benchmark alphabet must not be empty")
        if repeats < 1:
            raise ValueError("repeats must be at least 1")

        self.sizes = list(sizes)
        self.alphabet = alphabet
        self.repeats = repeats
        self.shuffle = shuffle
        self.logger = logger if logger is not None else Logger()
        self.results: List[BenchmarkResult] = []

    def make_text(self, size: int) -> str:
        # The alphabet repeated, cut to size; shuffled with a fixed seed if asked.
        text = (self.alphabet * (size // len(self.alphabet) + 1))[:size]
        if self.shuffle:
            chars = list(text)
            random.Random(SEED).shuffle(chars)
            text = "".join(chars)
        return text

    def make_frequencies(self, size: int) -> Dict[str, int]:
        share = max(size // len(self.alphabet), 1)
        return {symbol: share for symbol in self.alphabet}

    def _time(self, function: Callable, argument) -> float:
        best = float("inf")
        for _ in range(self.repeats):
            start = time.perf_counter()
            function(argument)
            best = min(best, time.perf_counter() - start)
        return best

    def run(self) -> List[BenchmarkResult]:
        self.results = []
        for size in self.sizes:
            text = self.make_text(size)
            freqs = self.make_frequencies(size)
            probs = freq_to_prob(freqs)
            cases = [
                ("frequency", frequency, text),
                ("freq_to_prob", freq_to_prob, freqs),
                ("entropy", entropy, probs),
                ("huffman", huffman, freq_to_prob(frequency(text))),
            ]
            for name, function, argument in cases:
                seconds = self._time(function, argument)
                self.results.append(BenchmarkResult(name, size, seconds))
                self.logger.log(BenchmarkLog(name, size, seconds))
        return self.results
