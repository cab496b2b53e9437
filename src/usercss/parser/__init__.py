from usercss.parser.author import parse_author
from usercss.parser.documents import parse_document_rules
from usercss.parser.errors import EmptyInputError, NoDirectivesError, ParseError
from usercss.parser.parser import parse_usercss
from usercss.parser.scanner import Directive, scan_directives

__all__ = [
    "parse_usercss",
    "parse_author",
    "parse_document_rules",
    "scan_directives",
    "Directive",
    "ParseError",
    "EmptyInputError",
    "NoDirectivesError",
]
