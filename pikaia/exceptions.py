class PikaiaError(Exception):
    """Base for all PIKAIA exceptions."""

    pass


class ConfigurationError(PikaiaError):
    """Malformed options, or solving with a configuration that failed validation."""

    pass


class EvolutionError(PikaiaError):
    """Evolution process failures."""

    pass


class SelectionError(EvolutionError):
    """Roulette wheel fell through without picking an individual."""

    pass
