class ScmError(Exception):
    """ Base class for all scm errors"""
    pass


class ScmSyntaxError(ScmError):
    """ Raised when the reader cannot consume its input.

    `remainder` is the unconsumed text and `position` its offset into the
    source that was being read.
    """

    def __init__(self, message: str, remainder: str = "", position: int = 0):
        super().__init__(f"{message}, remaining input: {remainder!r}")
        self.remainder = remainder
        self.position = position


class ScmExpansionError(ScmError):
    """ Raised when a special form has the wrong arity or shape"""


class ScmUnboundSymbol(ScmError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"undefined symbol: {symbol}")
        self.symbol = symbol


class ScmInvalidSymbol(ScmError):
    """ Raised when something other than a symbol is used as a binding name"""


class ScmTypeError(ScmError):
    """ Raised when a value is used where a different kind of value is required"""


class ScmArityError(ScmError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class ScmNotCallable(ScmError):
    """ Raised when the head of an application is neither a closure nor a primitive"""


class ScmImportError(ScmError, OSError):
    """ Raised when an imported source file cannot be read"""
