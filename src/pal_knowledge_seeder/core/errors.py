"""Exceptions raised by the seeding pipeline's setup steps."""


class SeedError(Exception):
    """Base class for fatal seeding errors."""


class DatasetLoadError(SeedError):
    """The dataset file is missing, unparsable, or has no intents list."""


class StoreConnectionError(SeedError):
    """The target vector-store collection could not be opened."""
