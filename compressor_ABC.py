from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Інтерфейс компресора байтових буферів.
    Кожен алгоритм читає весь вхідний потік у пам'ять, перетворює його
    і записує результат у вихідний потік одним записом.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Стискає вміст input_stream і записує результат у output_stream.

        Returns:
            Рядок з інформацією для логування
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Розпаковує вміст input_stream і записує результат у output_stream.
        Якщо потік пошкоджений, нічого не записується.

        Returns:
            Рядок з інформацією для логування
        """

    def size_report(self, size_before: int, size_after: int) -> str:
        """Describes how the size changed after one call."""
        diff = size_before - size_after
        if diff > 0:
            ratio = diff / size_before * 100
            return f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)"
        if diff < 0:
            return f"Size increased by {-diff} bytes"
        return "Size unchanged"

    @classmethod
    def compress_file(cls, input_file: str, output_file: str) -> str:
        """
        Стискає файл input_file у output_file.
        """
        compressor = cls()
        with open(input_file, "rb") as in_file, open(output_file, "wb") as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str) -> str:
        """
        Розпаковує файл input_file у output_file.
        """
        compressor = cls()
        # Спершу декодуємо в пам'ять, щоб не лишати напівзаписаний файл
        with open(input_file, "rb") as in_file:
            out_buffer = io.BytesIO()
            log_info = compressor.decompress(in_file, out_buffer)
        with open(output_file, "wb") as out_file:
            out_file.write(out_buffer.getvalue())
        return log_info

    @classmethod
    def compress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Returns:
            Кортеж (стиснені дані, інформація про стиснення)
        """
        compressor = cls()
        out_buffer = io.BytesIO()
        log_info = compressor.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Returns:
            Кортеж (розпаковані дані, інформація про розпакування)
        """
        compressor = cls()
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info
