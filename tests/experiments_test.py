import unittest
from huffcodec.experiments import ComplexityExperiment, BenchmarkResult
from huffcodec.logger import Logger, BenchmarkLog

class TestComplexityExperiment(unittest.TestCase):
    def test_run(self):
        logger = Logger()
        experiment = ComplexityExperiment(sizes=(8, 16), repeats=1, logger=logger)
        results = experiment.run()
        self.assertEqual(len(results), 8)
        self.assertTrue(all(isinstance(r, BenchmarkResult) for r in results))
        self.assertEqual([r.function_name for r in results[:4]], ["frequency", "freq_to_prob", "entropy", "huffman"])
        self.assertEqual([r.size for r in results], [8] * 4 + [16] * 4)
        self.assertTrue(all(r.seconds >= 0 for r in results))
        self.assertEqual(len(logger.of_type(BenchmarkLog)), 8)

    def test_make_text(self):
        experiment = ComplexityExperiment()
        self.assertEqual(experiment.make_text(10), "ABCDABCDAB")
        self.assertEqual(experiment.make_frequencies(100), {'A': 25, 'B': 25, 'C': 25, 'D': 25})

    def test_shuffled_text_is_reproducible(self):
        first = ComplexityExperiment(shuffle=True).make_text(64)
        second = ComplexityExperiment(shuffle=True).make_text(64)
        self.assertEqual(first, second)
        self.assertEqual(sorted(first), sorted(ComplexityExperiment().make_text(64)))

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            ComplexityExperiment(sizes=(0,))
        with self.assertRaises(ValueError):
            ComplexityExperiment(sizes=("10",))
        with self.assertRaises(ValueError):
            ComplexityExperiment(alphabet="")
        with self.assertRaises(ValueError):
            ComplexityExperiment(repeats=0)

if __name__ == '__main__':
    unittest.main()
