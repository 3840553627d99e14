"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Union, Optional

from .settings import MERGE_STEP_INTERVAL_COUNT, CODING_STEP_INTERVAL_COUNT


class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class SymbolCodeLog(Log):
    def __init__(self, symbol: str, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Symbol_code_log", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {code}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class EntropyLog(Log):
    def __init__(self, entropy: float, expected_length: Optional[float] = None) -> None:
        self.entropy = entropy
        self.expected_length = expected_length
        message = f"Entropy: {entropy}"
        if expected_length is not None:
            message += f", Expected length: {expected_length}"
        super().__init__("Entropy_log", LogLevel.INFO, message)


class BenchmarkLog(Log):
    def __init__(self, function_name: str, size: int, seconds: float) -> None:
        self.function_name = function_name
        self.size = size
        self.seconds = seconds
        super().__init__("Benchmark_log", LogLevel.INFO, f"{function_name} size={size}: {seconds:.6f}s")


class TreeMergeProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Tree_merge_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.merge_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.merge_step_interval_count = MERGE_STEP_INTERVAL_COUNT
        self.coding_step_interval_count = CODING_STEP_INTERVAL_COUNT

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, TreeMergeProgressStep):
                self.merge_progress_count += 1
                self._progress(log, self.merge_progress_count, self.merge_step_interval_count)
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                self._progress(log, self.coding_progress_count, self.coding_step_interval_count)

    def reset_merge_progress(self) -> None:
        """Restart merge step counting, called when a new tree is built."""
        self.merge_progress_count = 0

    def reset_coding_progress(self) -> None:
        """Restart coding step counting, called when a new text is encoded."""
        self.coding_progress_count = 0

    def _progress(self, log: Union[TreeMergeProgressStep, CodingProgressStep], count: int, interval: int) -> None:
        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        if self.display_progress and (count % interval == 0):
            print(log)

    def of_type(self, log_type: type) -> list:
        """Return the recorded logs that are instances of log_type."""
        return [log for log in self.logs if isinstance(log, log_type)]

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
