"""Configuration module for the fuzzy LP model generator."""

from dataclasses import dataclass, field
from pathlib import Path
import logging


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("fuzzylp")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


@dataclass
class SynthesisParams:
    """Parameters for LP model synthesis."""
    alpha: float = 0.5
    num_products: int = 4
    num_resources: int = 3
    
    # Ranges offered by the interactive editor; outside them only a warning
    product_range: tuple = (3, 5)
    resource_range: tuple = (2, 4)


@dataclass
class Config:
    """Configuration class for the model generator."""
    
    # File paths
    problem_file: str
    output_file: str = "lp_model.txt"
    report_file: str = ""
    
    # Synthesis parameters
    synthesis_params: SynthesisParams = field(default_factory=SynthesisParams)
    
    # Output language of the model text ("en" or "ro")
    labels: str = "en"
    
    # Logging
    log_level: int = logging.INFO
    
    # Base directories (computed)
    _base_dir: Path = field(init=False)
    _data_dir: Path = field(init=False)
    
    def __post_init__(self):
        self._base_dir = Path(__file__).parent.parent
        self._data_dir = self._base_dir / "data"
        
        # Resolve relative paths
        if not Path(self.problem_file).is_absolute() and not Path(self.problem_file).exists():
            self.problem_file = str(self._data_dir / self.problem_file)


# Default configuration
def get_default_config() -> Config:
    """Return default configuration."""
    return Config(problem_file="sample_problem.json")
