"""
Configuration management for linekit operations.
"""

import io
import math
from typing import ClassVar, Optional
from dataclasses import dataclass
from enum import Enum
import psutil


class BufferStrategy(Enum):
    """Strategy for determining read-buffer sizes."""
    FIXED = "fixed"
    MEMORY_BASED = "memory_based"
    ADAPTIVE = "adaptive"


@dataclass
class LineKitConfig:
    """Global configuration for linekit operations."""
    
    # Buffering
    buffer_strategy: BufferStrategy = BufferStrategy.ADAPTIVE
    fixed_buffer_size: int = io.DEFAULT_BUFFER_SIZE
    min_buffer_size: int = io.DEFAULT_BUFFER_SIZE
    max_buffer_size: int = 1024 * 1024
    memory_fraction: float = 0.001  # Share of available RAM per buffer
    high_memory_percent: float = 85.0
    
    # Decoding
    encoding: str = "utf-8"
    decode_errors: str = "replace"
    
    # Inputs
    stdin_designator: str = "-"
    
    # Formatting
    number_width: int = 6  # cat line numbers
    count_width: int = 4  # uniq run lengths
    tally_width: int = 8  # wc columns
    total_label: str = "total"
    default_head_lines: int = 10
    
    _instance: ClassVar[Optional['LineKitConfig']] = None
    
    @classmethod
    def get_instance(cls) -> 'LineKitConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                if key == "buffer_strategy" and isinstance(value, str):
                    value = BufferStrategy(value)
                setattr(instance, key, value)
    
    def calculate_buffer_size(self, total_size: Optional[int] = None) -> int:
        """
        Calculate the read-buffer size for a stream.
        
        Args:
            total_size: Size of the underlying file in bytes, if known
        """
        if self.buffer_strategy == BufferStrategy.FIXED:
            return self.fixed_buffer_size
        
        elif self.buffer_strategy == BufferStrategy.MEMORY_BASED:
            available = psutil.virtual_memory().available
            return self._clamp(int(available * self.memory_fraction))
        
        elif self.buffer_strategy == BufferStrategy.ADAPTIVE:
            if not total_size:
                # Pipes and empty files: size unknown
                return self.fixed_buffer_size
            base_size = self._clamp(int(math.sqrt(total_size)))
            if psutil.virtual_memory().percent > self.high_memory_percent:
                return max(self.min_buffer_size, base_size // 2)
            return base_size
        
        return self.fixed_buffer_size
    
    def _clamp(self, size: int) -> int:
        return max(self.min_buffer_size, min(size, self.max_buffer_size))


# Global configuration instance
config = LineKitConfig.get_instance()
