class SchemeError(Exception):
    """ Base class for all evaluator errors"""
    pass

class SchemeTypeMismatch(SchemeError):
    """ Raised when an accessor is used on the wrong kind of expression"""
    pass

class SchemeUnboundVariable(SchemeError):
    """ Raised when a variable is not bound anywhere in the environment chain"""
    pass

class SchemeMalformedForm(SchemeError):
    """ Raised when a special form does not have the expected shape"""

class SchemeArityError(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemeSyntaxError(SchemeError):
    """ Raised when the reader cannot parse its input"""

class SchemeRecursionError(SchemeError):
    """ Raised when evaluation nests deeper than the host stack allows"""

class SchemeIncompleteInput(SchemeSyntaxError):
    """ Raised when the input ends inside an unfinished form"""
