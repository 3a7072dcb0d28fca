
class KeyBenchError(Exception):
    """ Base class for all keybench errors"""
    pass

class ConfigError(KeyBenchError):
    """ Raised when an environment setting cannot be parsed or is out of range"""

class ScenarioError(KeyBenchError):
    """ Raised when a scenario is given invalid arguments"""

class ReadOnlyTableError(KeyBenchError):
    """ Raised when a lookup table is mutated after construction"""
