from oneliners.rules.loader import RulesValidationError, default_rules, load_rules
from oneliners.rules.models import GeneratorRules, Rules

__all__ = [
    "GeneratorRules",
    "Rules",
    "RulesValidationError",
    "default_rules",
    "load_rules",
]
