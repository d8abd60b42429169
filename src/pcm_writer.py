"""
Raw PCM file sink for the processed benchmark buffers.

Layout: IEEE-754 float64 samples in native byte order, no header, in generation order.
"""
import logging
import os

import numpy as np

logger = logging.getLogger(__name__)


class PcmFileWriter:
    """
    Append-only writer of float64 buffers, any previous file at the path is discarded
    """
    def __init__(self, path: str):
        """
        :param path: The output file path
        """
        self.path = path
        if os.path.exists(path):
            os.remove(path)
        self.file = open(path, 'wb')
        self.samples_written = 0
        logger.debug('Opened PCM output %s', path)

    def write_buffer(self, buf: np.ndarray) -> None:
        """
        Append a buffer to the file, the buffer itself is left untouched
        :param buf: The buffer (1D float64)
        """
        np.ascontiguousarray(buf, dtype=np.float64).tofile(self.file)
        self.samples_written += buf.shape[0]

    def close(self) -> None:
        if not self.file.closed:
            self.file.close()
            logger.debug('Closed PCM output %s (%d samples)', self.path, self.samples_written)

    def __enter__(self) -> 'PcmFileWriter':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
