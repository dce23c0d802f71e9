from .config import JobConfig, load_config
