class TallyError(Exception):
    """ Base class for all Tally errors"""
    pass

class TallySyntaxError(TallyError):
    """ Raised when the token sequence is not a well-formed expression"""

class TallyResolutionError(TallyError):
    """ Raised when an atom is neither a number nor anything else we can resolve"""

    def __init__(self, atom: str, pos: int | None = None):
        where = f" at offset {pos}" if pos is not None else ""
        super().__init__(f"cannot resolve atom {atom!r}{where}")
        self.atom = atom
        self.pos = pos

class TallyOperatorError(TallyError):
    """ Raised when no operator matches a form's head and argument count"""

    def __init__(self, name: str | None, argc: int, message: str | None = None):
        if message is None:
            if name is None:
                message = f"failed to simplify: form with {argc} argument(s) has no operator name"
            else:
                message = f"failed to simplify: no operator {name!r} taking {argc} argument(s)"
        super().__init__(message)
        self.name = name
        self.argc = argc

class TallyArityError(TallyOperatorError):
    """ Raised when a variadic operator receives fewer arguments than it needs"""

class TallyTypeError(TallyError):
    """ Raised when an operator argument does not simplify to the required type"""

    def __init__(self, operator: str, position: int, expected: str, found: str):
        super().__init__(f"{operator}: argument #{position} must be {expected}, got {found}")
        self.operator = operator
        self.position = position
        self.expected = expected
        self.found = found

class TallyZeroDivisionError(TallyError):
    """ Raised on division by zero"""

class TallyOverflowError(TallyError):
    """ Raised when a number is too large to read, convert or promote"""

class TallyNestingError(TallyError):
    """ Raised when a program nests deeper than the interpreter can recurse"""
