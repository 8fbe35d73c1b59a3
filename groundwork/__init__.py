"""Foundation utilities: concurrency primitives, worker pools, sequencers, error types, versions and PEM helpers."""

__version__ = "2.0.0"