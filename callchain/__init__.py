# CallChain interpreter
# Tokenize, parse and evaluate call-chain expressions against a host scope.
__version__ = "0.1.0"

from .tokens import Token, TokenType
from .lexer import Lexer, LexerError, UnterminatedString, tokenize
from .parser import Parser, ParseError, UnterminatedCall, parse
from .ast_nodes import StringLiteral, Identifier, CallExpression, Program
from .runtime import Interpreter, evaluate, run
