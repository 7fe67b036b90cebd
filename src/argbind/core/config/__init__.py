from .parser_config import DEFAULT_DIAGNOSTIC_PREFIX, ParserConfig

__all__ = ["DEFAULT_DIAGNOSTIC_PREFIX", "ParserConfig"]
