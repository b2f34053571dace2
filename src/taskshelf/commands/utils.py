"""Helpers shared by command modules."""

from taskshelf.config import get_config_manager


def resolve_output(output: str | None) -> str:
    """Use the explicit --output value, else the configured default."""
    if output:
        return output
    return get_config_manager().config.output.format
