"""
Run Context
===========

Process-wide state for a single generation run: the configuration and the
temporary directory that holds downloaded archives. The directory is
removed on every exit path.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from .config import GeneratorConfig

logger = logging.getLogger(__name__)


class RunContext:
    """Scoped state for one generation run.

    Use as a context manager::

        with RunContext(config) as ctx:
            archive = resolve_archive(config.src, ctx)
    """

    def __init__(self, config: GeneratorConfig, prefix: str = "fontpack-"):
        self.config = config
        self.prefix = prefix
        self._temp_dir: Path | None = None

    @property
    def temp_dir(self) -> Path:
        """Temporary directory of the run, created on first use."""
        if self._temp_dir is None:
            self._temp_dir = Path(tempfile.mkdtemp(prefix=self.prefix))
            logger.debug(f"Created temporary directory: {self._temp_dir}")
        return self._temp_dir

    @property
    def is_open(self) -> bool:
        return self._temp_dir is not None

    def close(self) -> None:
        """Remove the temporary directory and everything in it."""
        if self._temp_dir is None:
            return
        shutil.rmtree(self._temp_dir, ignore_errors=True)
        logger.debug(f"Removed temporary directory: {self._temp_dir}")
        self._temp_dir = None

    def __enter__(self) -> "RunContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
