
class SteelError(Exception):
    """ Base class for all steel errors"""
    pass

# ---------------------------------------------------------------------------
# Read-time failures
# ---------------------------------------------------------------------------

class SteelParseError(SteelError):
    """ Base class for failures raised while reading source text"""
    pass

class SteelTokenError(SteelParseError):
    """ Raised when the lexer cannot produce a token"""

    def __init__(self, message: str, pos: int = -1):
        if pos >= 0:
            message = f"{message} (at offset {pos})"
        super().__init__(message)
        self.pos = pos

class SteelUnexpectedError(SteelParseError):
    """ Raised when a token appears where it cannot, e.g. an unmatched ')'"""

    def __init__(self, token):
        message = f"Parse: Unexpected token, {token!r}"
        if token.pos >= 0:
            message = f"{message} (at offset {token.pos})"
        super().__init__(message)
        self.token = token

class SteelUnexpectedEOF(SteelParseError):
    """ Raised when input ends inside a form or after a quote marker"""

    def __init__(self, message: str = "Parse: Unexpected EOF"):
        super().__init__(message)

# ---------------------------------------------------------------------------
# Evaluation-time failures
# ---------------------------------------------------------------------------

class SteelTypeMismatch(SteelError):
    """ Raised when a value or operand has the wrong kind"""

class SteelArityMismatch(SteelError):
    """ Raised when a form or function receives the wrong number of operands"""

class SteelBadSyntax(SteelError):
    """ Raised when a compound operand has a malformed shape"""

class SteelUnboundIdentifier(SteelError):
    """ Raised when a name is looked up or set before it is bound"""

class SteelUnexpectedToken(SteelError):
    """ Raised when an atom has no evaluation rule"""

class SteelContractViolation(SteelError):
    """ Raised when a value does not satisfy an operation's contract"""
