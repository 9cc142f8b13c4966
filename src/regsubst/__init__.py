"""regsubst — regular expression substitution over strings, string arrays and sensitive values."""

from .errors import InvalidBackreference, InvalidFlag, PatternCompileError, SubstitutionError
from .flags import parse_flags
from .matcher import build_matcher
from .substitute import Substituter, substitute
from .function import regsubst
from .config import Rule, RuleSet, create_rule_set, load_config, load_from_yaml
from .types import CompileOption, ParsedFlags, ReplaceMode, Sensitive

__all__ = [
    "substitute", "Substituter", "regsubst",
    "parse_flags", "build_matcher",
    "Rule", "RuleSet", "create_rule_set", "load_config", "load_from_yaml",
    "Sensitive", "ReplaceMode", "CompileOption", "ParsedFlags",
    "SubstitutionError", "PatternCompileError", "InvalidFlag", "InvalidBackreference",
]
__version__ = "0.1.0"
