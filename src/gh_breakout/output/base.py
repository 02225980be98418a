"""Base class for output format providers."""

from abc import ABC, abstractmethod

from ..config import DEFAULT_CONFIG, BreakoutConfig
from ..game.timeline import SimulationRun


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = "", config: BreakoutConfig = DEFAULT_CONFIG):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
            config: Encoding and playback settings
        """
        self.path = path
        self.config = config

    @abstractmethod
    def encode(self, run: SimulationRun) -> bytes:
        """
        Encode a finished simulation into the output format.

        Args:
            run: Simulation history and the scene it was produced from

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
