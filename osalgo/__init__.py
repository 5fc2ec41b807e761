"""Classic operating-system algorithms: scheduling, Banker's safety check, memory fits, page replacement, dining philosophers and producer-consumer."""

__version__ = "0.1.0"