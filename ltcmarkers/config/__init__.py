"""Import configuration: model, CLI parser and validation."""

from .models import ImportConfig
from .parser import ConfigParser
from .validator import ConfigValidator

__all__ = ['ImportConfig', 'ConfigParser', 'ConfigValidator']
