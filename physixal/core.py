"""Engine start-up and shut-down."""

from __future__ import annotations

from . import log

__all__ = ["BUILD_ID", "initialize_core", "shutdown_core"]

BUILD_ID = "v0.03"


def initialize_core(log_file: str = "PhysiXal.log") -> None:
    """Start logging and announce the engine build."""
    log.init(log_file)
    core = log.get_core_logger()
    client = log.get_client_logger()
    core.trace(f"PhysiXal {BUILD_ID}")
    core.trace("Initializing...")
    core.info("Log (core)")
    client.info("Application (client)")


def shutdown_core() -> None:
    """Announce shut-down and stop logging."""
    core = log.get_core_logger()
    client = log.get_client_logger()
    if core is None or client is None:
        raise RuntimeError("core is not initialized")
    core.trace("...Shutting down")
    client.warning("...Application (client)")
    core.warning("...Log (core)")
    log.shutdown()