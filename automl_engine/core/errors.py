"""Trainer-extension exceptions.

These are intentionally lightweight so they can be raised from construction
paths without importing the catalog or any sklearn symbols.
"""


class TrainerExtensionError(RuntimeError):
    """Base class for failures while configuring a trainer extension."""


class ConfigurationMismatchError(TrainerExtensionError, ValueError):
    """Raised when supplied hyperparameters disagree with the declared sweep ranges."""


class UnknownHyperparameterError(ConfigurationMismatchError):
    """Raised when a hyperparameter name is not declared by the extension."""


class HyperparameterValueError(ConfigurationMismatchError):
    """Raised when a hyperparameter value falls outside its declared range."""


class UnexpectedTrainerTypeError(TrainerExtensionError, TypeError):
    """Raised when a wrapped binary extension yields the wrong estimator type."""


class UnsupportedColumnRoleError(TrainerExtensionError, ValueError):
    """Raised when a column role is requested that the algorithm cannot consume."""


class UnknownTrainerError(TrainerExtensionError, LookupError):
    """Raised when a trainer name or extension is not in the catalog."""
