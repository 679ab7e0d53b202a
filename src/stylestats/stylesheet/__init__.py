from stylestats.stylesheet.errors import ParseError
from stylestats.stylesheet.model import Declaration, Rule, Stylesheet
from stylestats.stylesheet.parser import parse_stylesheet

__all__ = ["parse_stylesheet", "ParseError", "Stylesheet", "Rule", "Declaration"]
